"""Repository ports."""

from mdcorpus.application.ports.repositories.document_repository import (
    DocumentRepository,
)

__all__ = [
    "DocumentRepository",
]
