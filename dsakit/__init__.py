"""Classic data structures and algorithms: searching, arrays, recursion,
heaps, linked lists, queues, stacks and binary trees."""

__version__ = "0.1.0"