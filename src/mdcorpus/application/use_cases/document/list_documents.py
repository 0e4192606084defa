"""List documents use case."""

from collections.abc import AsyncIterator

from mdcorpus.application.dto.document_dto import ListDocumentsInput
from mdcorpus.application.ports import DocumentRepository
from mdcorpus.domain.entities import DocumentSummary
from mdcorpus.domain.exceptions import ValidationError
from mdcorpus.domain.value_objects import DocumentId


class DocumentListing:
    """Lazy, restartable sequence of document summaries.

    Every iteration rescans the repository, so iterating twice over an
    unchanged corpus yields the same documents in the same order.
    """

    def __init__(
        self,
        repository: DocumentRepository,
        *,
        tag: str | None = None,
        category: str | None = None,
        after: DocumentId | None = None,
        limit: int | None = None,
    ) -> None:
        self._repository = repository
        self._tag = tag
        self._category = category
        self._after = after
        self._limit = limit

    def __aiter__(self) -> AsyncIterator[DocumentSummary]:
        return self._iterate(self._limit)

    async def _iterate(self, limit: int | None) -> AsyncIterator[DocumentSummary]:
        count = 0
        async for summary in self._repository.list(
            tag=self._tag, category=self._category, after=self._after
        ):
            if limit is not None and count >= limit:
                return
            count += 1
            yield summary

    async def to_list(self) -> list[DocumentSummary]:
        return [summary async for summary in self]

    async def page(self) -> tuple[list[DocumentSummary], str | None]:
        """Return one page and the cursor of the next one (None on the last page)."""
        if self._limit is None:
            return (await self.to_list(), None)
        items = [s async for s in self._iterate(self._limit + 1)]
        if len(items) > self._limit:
            items = items[: self._limit]
            return (items, str(items[-1].id))
        return (items, None)


class ListDocumentsUseCase:
    """Enumerate the corpus, optionally filtered by tag or category."""

    def __init__(self, document_repository: DocumentRepository) -> None:
        self._repository = document_repository

    def execute(self, input_data: ListDocumentsInput | None = None) -> DocumentListing:
        """Build a listing. Nothing is read until it is iterated."""
        input_data = input_data or ListDocumentsInput()
        if input_data.limit is not None and input_data.limit < 1:
            raise ValidationError("limit must be positive")
        after = None
        if input_data.cursor:
            try:
                after = DocumentId(input_data.cursor)
            except ValueError as e:
                raise ValidationError(f"Invalid cursor: {e}") from e
        return DocumentListing(
            self._repository,
            tag=input_data.tag,
            category=input_data.category,
            after=after,
            limit=input_data.limit,
        )
