"""Classroom examples of searching, hashing, linked lists, stacks and queues, with console programs."""

__version__ = "0.1.0"