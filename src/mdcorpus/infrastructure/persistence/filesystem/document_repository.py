"""Filesystem document repository: one Markdown file per document."""

import asyncio
from collections.abc import AsyncIterator, Callable, Iterable
from pathlib import Path

from mdcorpus.application.dto.corpus_dto import SourceFile
from mdcorpus.domain.entities import Document, DocumentSummary
from mdcorpus.domain.exceptions import DuplicateDocument, InvalidDocument
from mdcorpus.domain.value_objects import DocumentId
from mdcorpus.infrastructure.document_parsers import parse_file, supported_extensions
from mdcorpus.logging import get_component_logger

logger = get_component_logger("repository")


class FileSystemDocumentRepository:
    """Document repository and corpus source over a directory tree.

    Files and directories whose name starts with a dot are ignored. Files are
    visited in (document id, path) order; when two files share an id the first
    one wins.
    """

    def __init__(
        self,
        root: Path,
        *,
        extensions: Iterable[str] | None = None,
        parser: Callable[[bytes, DocumentId, Path], Document] = parse_file,
        strict: bool = False,
    ) -> None:
        self._root = Path(root)
        self._extensions = tuple(
            e.lstrip(".").lower() for e in (extensions or supported_extensions())
        )
        self._parser = parser
        self._strict = strict

    @property
    def root(self) -> Path:
        return self._root

    def exists(self) -> bool:
        return self._root.is_dir()

    def _scan(self) -> list[SourceFile]:
        if not self._root.is_dir():
            logger.warning("Content directory %s does not exist", self._root)
            return []
        found: list[SourceFile] = []
        rejected: list[SourceFile] = []
        for path in self._root.rglob("*"):
            relative = path.relative_to(self._root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.suffix.lstrip(".").lower() not in self._extensions or not path.is_file():
                continue
            try:
                document_id = DocumentId.from_path(self._root, path)
            except ValueError as e:
                logger.warning("Skipping %s: %s", path, e)
                rejected.append(SourceFile(path=path, document_id=None, id_error=str(e)))
                continue
            found.append(SourceFile(path=path, document_id=document_id))
        found.sort(key=lambda s: (s.document_id, str(s.path)))
        rejected.sort(key=lambda s: str(s.path))
        return found + rejected

    async def files(self) -> AsyncIterator[SourceFile]:
        """Every corpus file in id order; files without a valid id come last."""
        for source in await asyncio.to_thread(self._scan):
            yield source

    async def read_bytes(self, path: Path) -> bytes:
        return await asyncio.to_thread(Path(path).read_bytes)

    def _find(self, document_id: DocumentId) -> Path | None:
        target = self._root / document_id.value
        if not target.parent.is_dir():
            return None
        matches = sorted(
            p
            for p in target.parent.iterdir()
            if p.stem == target.name
            and p.suffix.lstrip(".").lower() in self._extensions
            and p.is_file()
        )
        return matches[0] if matches else None

    async def _load(self, path: Path, document_id: DocumentId) -> Document:
        data = await self.read_bytes(path)
        return self._parser(data, document_id, path)

    async def get_by_id(self, document_id: DocumentId) -> Document | None:
        """Read and parse the document; parse errors propagate as InvalidDocument."""
        if any(part.startswith(".") for part in document_id.value.split("/")):
            return None
        path = await asyncio.to_thread(self._find, document_id)
        if path is None:
            return None
        return await self._load(path, document_id)

    async def list(
        self,
        *,
        tag: str | None = None,
        category: str | None = None,
        after: DocumentId | None = None,
    ) -> AsyncIterator[DocumentSummary]:
        """Yield summaries lazily; each call rescans the directory."""
        wanted_tag = tag.casefold() if tag else None
        wanted_category = category.casefold() if category else None
        seen: set[DocumentId] = set()
        async for source in self.files():
            if source.document_id is None:
                continue
            if source.document_id in seen:
                if self._strict:
                    raise DuplicateDocument(f"Duplicate document id: {source.document_id}")
                logger.warning("Skipping %s: duplicate id %s", source.path, source.document_id)
                continue
            seen.add(source.document_id)
            if after is not None and source.document_id <= after:
                continue

            try:
                document = await self._load(source.path, source.document_id)
            except (InvalidDocument, OSError) as e:
                if self._strict:
                    raise
                logger.warning("Skipping %s: %s", source.path, e)
                continue

            if wanted_tag and wanted_tag not in {t.casefold() for t in document.tags}:
                continue
            if wanted_category and (document.category or "").casefold() != wanted_category:
                continue
            yield document.summary()
