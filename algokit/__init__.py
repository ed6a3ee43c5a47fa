"""Classic algorithms and small data structures: searching, recursion,
trees, graphs, linked lists, sets, stacks, number types and puzzle solvers."""

__version__ = "0.1.0"