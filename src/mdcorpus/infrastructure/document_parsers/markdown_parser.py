"""Parser for Markdown posts with YAML front matter."""

import re
from dataclasses import dataclass
from pathlib import Path

from mdcorpus.domain.entities import Document
from mdcorpus.domain.exceptions import InvalidDocument
from mdcorpus.domain.value_objects import DocumentId, SourceHash
from mdcorpus.infrastructure.document_parsers.front_matter import (
    parse_category,
    parse_date,
    parse_tags,
    parse_title,
    split_front_matter,
)
from mdcorpus.infrastructure.document_parsers.metadata_keys import KNOWN_KEYS

_MARKER_LINE = re.compile(r"^\s*<!--\s*more\s*-->\s*$", re.IGNORECASE)
# CommonMark fence: up to 3 spaces of indent, 3+ backticks or tildes, info string
_FENCE_LINE = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")


@dataclass(frozen=True)
class BodyScan:
    """Excerpt marker offsets and code fence languages found in a body."""

    marker_offsets: tuple[int, ...]
    code_languages: tuple[str, ...]


def scan_body(body: str) -> BodyScan:
    """Find excerpt markers outside fenced code and collect fence languages."""
    offsets: list[int] = []
    languages: list[str] = []
    fence: str | None = None
    pos = 0
    for line in body.splitlines(keepends=True):
        content = line.rstrip("\r\n")
        match = _FENCE_LINE.match(content)
        if fence is None:
            if match and not (match.group(1)[0] == "`" and "`" in match.group(2)):
                fence = match.group(1)
                info = match.group(2).strip()
                lang = info.split()[0].strip("{}.") if info else ""
                if lang and lang not in languages:
                    languages.append(lang)
            elif _MARKER_LINE.match(content):
                offsets.append(pos)
        elif (
            match
            and match.group(1)[0] == fence[0]
            and len(match.group(1)) >= len(fence)
            and not match.group(2).strip()
        ):
            fence = None
        pos += len(line)
    return BodyScan(marker_offsets=tuple(offsets), code_languages=tuple(languages))


def parse_markdown(data: bytes, document_id: DocumentId, source_path: Path) -> Document:
    """Build a Document from raw file bytes. Raises InvalidDocument on bad input."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidDocument(f"File is not valid UTF-8: {e.reason} at byte {e.start}") from e

    meta, body = split_front_matter(text)
    scan = scan_body(body)
    return Document(
        id=document_id,
        title=parse_title(meta.get("title")),
        date=parse_date(meta.get("date")),
        body=body,
        source_path=source_path,
        source_hash=SourceHash.of(data),
        category=parse_category(meta),
        tags=parse_tags(meta.get("tags")),
        excerpt_marker=scan.marker_offsets[0] if scan.marker_offsets else None,
        excerpt_marker_count=len(scan.marker_offsets),
        code_languages=scan.code_languages,
        extra={k: v for k, v in meta.items() if k not in KNOWN_KEYS},
    )
