"""Classic data structures and algorithms: lists, queues, stacks, matrices, search and sort."""

__version__ = "0.1.0"