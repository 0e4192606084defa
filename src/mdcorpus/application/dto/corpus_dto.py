"""Corpus DTOs."""

from dataclasses import dataclass, field
from pathlib import Path

from mdcorpus.domain.entities import Issue
from mdcorpus.domain.value_objects import DocumentId, IssueSeverity


@dataclass(frozen=True)
class SourceFile:
    """One Markdown file found in the corpus.

    ``document_id`` is None when the path cannot be turned into an id;
    ``id_error`` then says why.
    """

    path: Path
    document_id: DocumentId | None
    id_error: str | None = None


@dataclass
class CorpusReport:
    """Result of a corpus well-formedness check."""

    checked: int = 0
    issues: list[Issue] = field(default_factory=list)

    @property
    def errors(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == IssueSeverity.ERROR]

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == IssueSeverity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors
