"""Runtime services shared by the editor core and its hosts."""

from . import telemetry

__all__ = ["telemetry"]
