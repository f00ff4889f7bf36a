"""Classic data structures and algorithms: array helpers, searching, sorting, stacks, bracket checks, queues, linked lists and binary search trees."""

__version__ = "0.1.0"