"""Custom exceptions for roi_engine.

Projection and validation functions never raise on numeric input; these
types cover programming errors in the composition layer and I/O failures.
"""

from __future__ import annotations

from typing import Any


class RoiEngineError(Exception):
    """Base exception for all roi_engine errors."""
    pass


class UnknownAssetKindError(RoiEngineError):
    """No projector is registered for the requested asset kind."""

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"No projector registered for asset kind {kind!r}")


class InvalidParameterError(RoiEngineError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class EntryNotFoundError(RoiEngineError):
    """No portfolio entry has the requested identifier."""
    pass


class ExportError(RoiEngineError):
    """Failed to write projection results to disk."""
    pass
