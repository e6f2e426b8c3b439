"""A tile puzzle game: collect every item on a walled map, then reach the exit.

Includes map reading and validation, the game rules, a pygame window, and
small text, list and byte-buffer helpers.
"""

__version__ = "0.1.0"