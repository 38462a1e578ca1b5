"""Classic data structures and algorithms: lists, stacks, queues, hashing, heaps, trees, graphs, searching and sorting."""

__version__ = "0.1.0"