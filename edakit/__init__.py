"""Linked structures, search trees, sorting, grid search, mazes and BMP reading."""

__version__ = "0.1.0"