"""Document parser port."""

from pathlib import Path
from typing import Protocol

from mdcorpus.domain.entities import Document
from mdcorpus.domain.value_objects import DocumentId


class DocumentParser(Protocol):
    """Turns raw file bytes into a Document. Raises InvalidDocument on bad input."""

    def __call__(self, data: bytes, document_id: DocumentId, source_path: Path) -> Document: ...
