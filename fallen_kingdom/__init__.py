"""The Fallen Kingdom: a small top-down role-playing game built on pygame."""

__version__ = "0.1.0"