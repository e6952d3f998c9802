"""Classic algorithm drills: searching, arrays, text, containers, linked lists and trees."""

__version__ = "0.1.0"

__all__ = ["arrays", "containers", "linked_list", "searching", "text", "tree"]