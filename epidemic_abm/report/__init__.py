"""Reporting package for the SIR meeple simulation."""

from .reporter import Reporter

__all__ = ['Reporter']
