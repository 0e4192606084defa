"""Domain value objects."""

from mdcorpus.domain.value_objects.document_id import DocumentId
from mdcorpus.domain.value_objects.issue_severity import IssueSeverity
from mdcorpus.domain.value_objects.source_hash import SourceHash

__all__ = [
    "DocumentId",
    "IssueSeverity",
    "SourceHash",
]
