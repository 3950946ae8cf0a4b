"""Classic algorithms on arrays, strings, stacks, linked lists and recursion."""

__version__ = "0.1.0"