"""Command-line interface for the salestax project.

Usage:
    salestax
    salestax --no-banner < basket.txt
    salestax --log-level debug
"""
