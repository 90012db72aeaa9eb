"""Telemetry and observability helpers.

This package emits deterministic stage events for service runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
