"""Registry: select parser by file extension."""

from collections.abc import Callable
from pathlib import Path

from mdcorpus.domain.entities import Document
from mdcorpus.domain.value_objects import DocumentId
from mdcorpus.infrastructure.document_parsers.markdown_parser import parse_markdown

# extension (lower) -> parse function
_PARSERS_BY_EXT: dict[str, Callable[[bytes, DocumentId, Path], Document]] = {
    "md": parse_markdown,
    "markdown": parse_markdown,
}


def get_parser_for_path(
    path: Path | str | None,
) -> Callable[[bytes, DocumentId, Path], Document] | None:
    """Return parse function for given path (by extension) or None."""
    if not path:
        return None
    ext = Path(path).suffix.lstrip(".").lower()
    return _PARSERS_BY_EXT.get(ext)


def parse_file(data: bytes, document_id: DocumentId, source_path: Path) -> Document:
    """
    Select parser by the extension of source_path, run it, return Document.
    Raises ValueError if no parser is registered for the extension.
    """
    parser = get_parser_for_path(source_path)
    if not parser:
        raise ValueError(f"No parser for file type: {Path(source_path).suffix or 'unknown'}")
    return parser(data, document_id, source_path)


def supported_extensions() -> list[str]:
    """Return sorted list of supported file extensions."""
    return sorted(_PARSERS_BY_EXT.keys())
