"""Pure receipt logic: catalog lookup, line parsing, tax and formatting."""
