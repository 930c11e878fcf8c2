"""Snapshot validation package."""

from src.validation.validator import SnapshotValidator

__all__ = ["SnapshotValidator"]
