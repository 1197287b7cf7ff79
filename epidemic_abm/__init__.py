"""Agent-based SIR epidemic simulation."""

__version__ = "0.1.0"
