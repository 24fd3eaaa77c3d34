"""Solutions to classic algorithm exercises over numbers, strings, arrays, trees, graphs and linked lists."""

__version__ = "0.1.0"