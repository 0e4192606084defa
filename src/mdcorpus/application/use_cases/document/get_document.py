"""Get document use case."""

from mdcorpus.application.dto.document_dto import DocumentOutput
from mdcorpus.application.ports import DocumentRepository
from mdcorpus.domain.entities import Document
from mdcorpus.domain.exceptions import NotFound
from mdcorpus.domain.value_objects import DocumentId


async def load_document(repository: DocumentRepository, document_id: str) -> Document:
    """Fetch a document by raw id; malformed ids are reported as not found."""
    try:
        doc_id = DocumentId(document_id)
    except ValueError as e:
        raise NotFound("Document", document_id) from e
    document = await repository.get_by_id(doc_id)
    if document is None:
        raise NotFound("Document", document_id)
    return document


class GetDocumentUseCase:
    """Get a full document (metadata, excerpt and body) by id."""

    def __init__(self, document_repository: DocumentRepository) -> None:
        self._repository = document_repository

    async def execute(self, document_id: str) -> DocumentOutput:
        """Get document by id."""
        document = await load_document(self._repository, document_id)
        return DocumentOutput(
            id=str(document.id),
            title=document.title,
            date=document.date,
            category=document.category,
            tags=list(document.tags),
            excerpt=document.excerpt,
            body=document.body,
            code_languages=list(document.code_languages),
            source_hash=document.source_hash.value,
        )
