"""Classic algorithm routines on linked lists, containers, arrays, strings and integers."""

__version__ = "0.1.0"
__all__ = ["arrays", "containers", "integers", "linked_list", "strings"]