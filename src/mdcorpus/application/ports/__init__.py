"""Application ports - interfaces for external adapters."""

from mdcorpus.application.ports.corpus_source import CorpusSource
from mdcorpus.application.ports.document_parser import DocumentParser
from mdcorpus.application.ports.repositories import DocumentRepository

__all__ = [
    "CorpusSource",
    "DocumentParser",
    "DocumentRepository",
]
