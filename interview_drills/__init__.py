"""Classic coding-interview drills: arrays, linked lists, two pointers and sliding windows."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_lists", "sliding_window", "two_pointers"]