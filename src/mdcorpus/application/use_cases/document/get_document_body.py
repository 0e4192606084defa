"""Get document body use case."""

from mdcorpus.application.ports import DocumentRepository
from mdcorpus.application.use_cases.document.get_document import load_document


class GetDocumentBodyUseCase:
    """Return the raw Markdown body of a document."""

    def __init__(self, document_repository: DocumentRepository) -> None:
        self._repository = document_repository

    async def execute(self, document_id: str) -> str:
        document = await load_document(self._repository, document_id)
        return document.body
