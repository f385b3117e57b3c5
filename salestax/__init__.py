"""Sales tax receipt calculator for console shopping baskets."""

__version__ = "1.0.0"
