"""Agent-based model of social norm formation under conformity and nonconformity."""

__version__ = "0.1.0"

__all__ = ["agent", "cli", "distributions", "responses", "system"]