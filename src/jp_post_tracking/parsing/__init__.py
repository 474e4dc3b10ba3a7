from .extractor import extract_statuses

__all__ = ["extract_statuses"]
