"""
CLI Solver for Advent of Code 2022

This module provides a command-line interface for running the daily
puzzle solvers and reporting their answers.
"""

__version__ = "0.1.0"
