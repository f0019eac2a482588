"""Classic data structures: heaps, stacks, queues, linked lists, binary and search trees, counting and ranking helpers."""

__version__ = "0.1.0"