"""Bordered text tables for the terminal: cell styles, tables, terminal output and a demo command."""

__version__ = "0.1.0"
__all__ = ["cell", "cli", "commands", "style", "table", "terminal"]