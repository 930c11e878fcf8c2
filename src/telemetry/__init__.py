"""Structured logging package."""

from src.telemetry.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
