"""Corpus check issue entity."""

from dataclasses import dataclass
from pathlib import Path

from mdcorpus.domain.value_objects import IssueSeverity


@dataclass(frozen=True)
class Issue:
    """Well-formedness problem found in one corpus file."""

    path: Path
    code: str
    message: str
    severity: IssueSeverity = IssueSeverity.ERROR
    document_id: str | None = None
