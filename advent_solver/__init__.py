"""Advent of Code 2023 puzzle solvers built around a shared grid type."""
