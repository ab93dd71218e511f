"""Solvers for the 2025 Advent of Code puzzles, days 1 to 8, and a command to run them."""

__version__ = "0.1.0"
__all__ = ["day01", "day02", "day03", "day04", "day05", "day06", "day07", "day08", "cli"]