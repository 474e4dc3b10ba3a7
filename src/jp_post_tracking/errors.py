# src/jp_post_tracking/errors.py
from __future__ import annotations


class TrackingError(RuntimeError):
    """Base class for every failure raised while tracking a parcel."""


class MalformedDocumentError(TrackingError):
    """The history table is missing or its rows do not pair up."""

    def __init__(self, message: str = "Unexpected format.") -> None:
        super().__init__(message)


class PreconditionViolation(TrackingError, ValueError):
    """Classification was asked to run on a tracking without statuses."""


class TransportError(TrackingError):
    """The result page could not be fetched."""


__all__ = [
    "TrackingError",
    "MalformedDocumentError",
    "PreconditionViolation",
    "TransportError",
]
