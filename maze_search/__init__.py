"""Search-driven mover for a turn-based maze shared with pursuing adversaries."""

__version__ = "0.1.0"
