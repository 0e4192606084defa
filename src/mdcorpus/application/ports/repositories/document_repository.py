"""Document repository port."""

from collections.abc import AsyncIterator
from typing import Protocol

from mdcorpus.domain.entities import Document, DocumentSummary
from mdcorpus.domain.value_objects import DocumentId


class DocumentRepository(Protocol):
    """Port for read-only document access."""

    async def get_by_id(self, document_id: DocumentId) -> Document | None: ...

    def list(
        self,
        *,
        tag: str | None = None,
        category: str | None = None,
        after: DocumentId | None = None,
    ) -> AsyncIterator[DocumentSummary]: ...
