"""
Core utilities for Postboard.

This package provides functionality shared by every layer: logging configuration,
the domain error taxonomy, error telemetry and the database layer.
"""

from postboard.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
