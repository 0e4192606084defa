"""Corpus source port - raw access to the files behind the documents."""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Protocol

from mdcorpus.application.dto.corpus_dto import SourceFile


class CorpusSource(Protocol):
    """Port for enumerating and reading corpus files."""

    def files(self) -> AsyncIterator[SourceFile]: ...

    async def read_bytes(self, path: Path) -> bytes: ...
