# src/jp_post_tracking/__init__.py
from .errors import MalformedDocumentError, PreconditionViolation, TrackingError, TransportError
from .models import Tracking, TrackingStatus
from .parsing.extractor import extract_statuses
from .pipelines.tracker import TrackingPipeline, parse_document
from .rules.classifier import TrackingParser, classify_tracking

__all__ = [
    "MalformedDocumentError",
    "PreconditionViolation",
    "Tracking",
    "TrackingError",
    "TrackingParser",
    "TrackingPipeline",
    "TrackingStatus",
    "TransportError",
    "classify_tracking",
    "extract_statuses",
    "parse_document",
]
