"""Runtime services (telemetry) shared by the buffer package."""

from . import telemetry

__all__ = ["telemetry"]
