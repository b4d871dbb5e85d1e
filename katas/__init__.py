"""Solutions to classic array, string, number, linked-list and binary-tree exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_lists", "numeric", "strings", "trees"]