"""Application services."""

from seatwise.application.services.occurrence_materializer import (
    MAX_OCCURRENCES,
    build_occurrences,
    materialize_occurrence_dates,
)

__all__ = ["MAX_OCCURRENCES", "build_occurrences", "materialize_occurrence_dates"]
