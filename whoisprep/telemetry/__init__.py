"""Telemetry for preparation runs.

This package emits structured dispatch events for deterministic auditing.
"""

from .logger import PrepareLogger

__all__ = ["PrepareLogger"]
