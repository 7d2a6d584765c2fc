"""Stacks, queues, linked lists and backtracking algorithms."""

__version__ = "0.1.0"
__all__ = ["backtracking", "stacks", "linkedlists", "queues"]