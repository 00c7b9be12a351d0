"""Structured logging for document parsing."""

import logging
from typing import Any

from wandermint.config import get_settings

logger = logging.getLogger(__name__)


class StructuredParseLogger:
    """Structured logger for parse outcomes."""

    def log_rejection(self, trip_id: str | None, field: str | None, cause: str, path: str) -> None:
        """Log a rejected trip document with the failing field."""
        log_data: dict[str, Any] = {
            "event": "trip_rejected",
            "trip_id": trip_id,
            "field": field,
            "path": path,
            "cause": cause,
        }
        logger.warning(f"Trip document rejected: {cause}", extra={"structured": log_data})

    def log_dropped_structure(self, structure: str, path: str, reason: str) -> None:
        """Log an optional sub-structure that was parsed as absent."""
        log_data: dict[str, Any] = {
            "event": "structure_dropped",
            "structure": structure,
            "path": path,
            "reason": reason,
        }
        log_msg = f"Dropped optional {structure} at {path}: {reason}"

        if get_settings().log_dropped_structures:
            logger.warning(log_msg, extra={"structured": log_data})
        else:
            logger.debug(log_msg, extra={"structured": log_data})

    def log_skipped_item(self, collection: str, path: str, reason: str) -> None:
        """Log a list member that failed to parse and was left out."""
        log_data: dict[str, Any] = {
            "event": "item_skipped",
            "collection": collection,
            "path": path,
            "reason": reason,
        }
        logger.info(f"Skipped {collection} item at {path}: {reason}", extra={"structured": log_data})

    def log_vocabulary_fallback(self, vocabulary: str, raw: object, default: str, path: str) -> None:
        """Log an unrecognized enum tag that fell back to its default member."""
        log_data: dict[str, Any] = {
            "event": "vocabulary_fallback",
            "vocabulary": vocabulary,
            "raw": repr(raw),
            "default": default,
            "path": path,
        }
        logger.debug(
            f"Unrecognized {vocabulary} tag {raw!r}, using {default}",
            extra={"structured": log_data},
        )
