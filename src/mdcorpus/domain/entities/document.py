"""Document entity."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from mdcorpus.domain.value_objects import DocumentId, SourceHash


@dataclass(frozen=True)
class DocumentSummary:
    """Metadata record of a post, without its body."""

    id: DocumentId
    title: str
    date: date
    category: str | None
    tags: tuple[str, ...]
    has_excerpt: bool


@dataclass(frozen=True)
class Document:
    """Post read from a Markdown file with YAML front matter.

    ``excerpt_marker`` is the offset in ``body`` where the ``<!-- more -->``
    line starts, or None when the post has no teaser.
    """

    id: DocumentId
    title: str
    date: date
    body: str
    source_path: Path
    source_hash: SourceHash
    category: str | None = None
    tags: tuple[str, ...] = ()
    excerpt_marker: int | None = None
    excerpt_marker_count: int = 0
    code_languages: tuple[str, ...] = ()
    extra: dict[str, object] = field(default_factory=dict, compare=False)

    @property
    def has_excerpt(self) -> bool:
        return self.excerpt_marker is not None

    @property
    def excerpt(self) -> str | None:
        """Teaser text before the marker."""
        if self.excerpt_marker is None:
            return None
        return self.body[: self.excerpt_marker].strip()

    @property
    def more(self) -> str:
        """Body after the marker line (whole body without a marker)."""
        if self.excerpt_marker is None:
            return self.body
        end = self.body.find("\n", self.excerpt_marker)
        if end == -1:
            return ""
        return self.body[end + 1 :]

    def summary(self) -> DocumentSummary:
        return DocumentSummary(
            id=self.id,
            title=self.title,
            date=self.date,
            category=self.category,
            tags=self.tags,
            has_excerpt=self.has_excerpt,
        )
