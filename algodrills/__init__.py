"""Solutions to classic algorithm exercises on lists, strings, numbers and linked lists."""

__version__ = "0.1.0"