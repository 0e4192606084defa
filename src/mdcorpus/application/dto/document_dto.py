"""Document DTOs."""

from dataclasses import dataclass
from datetime import date


@dataclass
class ListDocumentsInput:
    """Filters for listing documents."""

    tag: str | None = None
    category: str | None = None
    cursor: str | None = None
    limit: int | None = None


@dataclass
class DocumentOutput:
    """Output DTO for a full document."""

    id: str
    title: str
    date: date
    category: str | None
    tags: list[str]
    excerpt: str | None
    body: str
    code_languages: list[str]
    source_hash: bytes
