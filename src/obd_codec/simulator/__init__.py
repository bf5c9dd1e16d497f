"""Simulated adapter for running without hardware."""

from .mock_adapter import MockAdapter

__all__ = ["MockAdapter"]
