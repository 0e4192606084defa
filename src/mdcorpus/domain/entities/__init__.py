"""Domain entities."""

from mdcorpus.domain.entities.document import Document, DocumentSummary
from mdcorpus.domain.entities.issue import Issue

__all__ = [
    "Document",
    "DocumentSummary",
    "Issue",
]
