"""Utility modules for Cadence."""

from cadence.utils.logging import ContextLogger, setup_logger

__all__ = ["ContextLogger", "setup_logger"]
