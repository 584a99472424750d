"""Solvers for Advent of Code 2022 and 2024 puzzles, one module per year and day."""

__version__ = "0.1.0"