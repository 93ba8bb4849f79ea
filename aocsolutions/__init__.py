"""Advent of Code puzzle solutions for 2022 and 2023 and the helpers they share."""

__version__ = "0.1.0"