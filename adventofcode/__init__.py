"""Advent of Code puzzle solutions and a command-line workflow tool."""

__version__ = "0.12.0"