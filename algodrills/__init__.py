"""Algorithm exercises on linked lists, trees, arrays, matrices, numbers, strings and text."""

__version__ = "0.1.0"
__all__ = ["arrays", "linkedlist", "matrix", "numbers", "strings", "text", "trees"]