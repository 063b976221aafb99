"""Two-stack sorting puzzle solver and a text-mode tile treasure hunt."""

__version__ = "0.1.0"