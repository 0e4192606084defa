"""Document parsers: turn Markdown files with front matter into documents."""

from mdcorpus.infrastructure.document_parsers.markdown_parser import (
    parse_markdown,
    scan_body,
)
from mdcorpus.infrastructure.document_parsers.registry import (
    parse_file,
    supported_extensions,
)

__all__ = ["parse_file", "parse_markdown", "scan_body", "supported_extensions"]
