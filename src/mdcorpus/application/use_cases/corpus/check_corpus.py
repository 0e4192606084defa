"""Check corpus use case - well-formedness of every file."""

from collections import Counter
from pathlib import Path

from mdcorpus.application.dto.corpus_dto import CorpusReport
from mdcorpus.application.ports import CorpusSource, DocumentParser
from mdcorpus.domain.entities import Issue
from mdcorpus.domain.exceptions import InvalidDocument, InvalidFrontMatter
from mdcorpus.domain.value_objects import DocumentId, IssueSeverity, SourceHash
from mdcorpus.logging import get_component_logger

logger = get_component_logger("check")


class CheckCorpusUseCase:
    """Parse every corpus file and report metadata hygiene problems."""

    def __init__(self, corpus_source: CorpusSource, parser: DocumentParser) -> None:
        self._source = corpus_source
        self._parser = parser

    async def execute(self) -> CorpusReport:
        """Check all files. Never raises for per-file problems."""
        report = CorpusReport()
        seen: dict[DocumentId, Path] = {}
        async for source in self._source.files():
            report.checked += 1
            if source.document_id is None:
                report.issues.append(
                    Issue(
                        path=source.path,
                        code="invalid-id",
                        message=f"Path cannot be used as a document id: {source.id_error}",
                    )
                )
                continue
            doc_id = str(source.document_id)
            first_path = seen.setdefault(source.document_id, source.path)
            if first_path != source.path:
                report.issues.append(
                    Issue(
                        path=source.path,
                        code="duplicate-id",
                        message=f"Id {doc_id!r} is already used by {first_path}",
                        document_id=doc_id,
                    )
                )
            report.issues.extend(await self._check_file(source.path, source.document_id))

        logger.info(
            "Checked %d files: %d errors, %d warnings",
            report.checked,
            len(report.errors),
            len(report.warnings),
        )
        return report

    async def _check_file(self, path: Path, document_id: DocumentId) -> list[Issue]:
        doc_id = str(document_id)
        try:
            first = await self._source.read_bytes(path)
            second = await self._source.read_bytes(path)
        except OSError as e:
            return [Issue(path=path, code="unreadable", message=str(e), document_id=doc_id)]

        issues: list[Issue] = []
        if SourceHash.of(first) != SourceHash.of(second):
            issues.append(
                Issue(
                    path=path,
                    code="unstable-read",
                    message="Reading the file twice gave different content",
                    document_id=doc_id,
                )
            )

        try:
            document = self._parser(first, document_id, path)
        except InvalidFrontMatter as e:
            issues.append(
                Issue(path=path, code="invalid-front-matter", message=str(e), document_id=doc_id)
            )
            return issues
        except InvalidDocument as e:
            issues.append(
                Issue(path=path, code="invalid-document", message=str(e), document_id=doc_id)
            )
            return issues

        if document.excerpt_marker_count > 1:
            issues.append(
                Issue(
                    path=path,
                    code="multiple-excerpt-markers",
                    message=f"Excerpt marker appears {document.excerpt_marker_count} times",
                    document_id=doc_id,
                )
            )

        duplicates = [tag for tag, n in Counter(document.tags).items() if n > 1]
        if duplicates:
            issues.append(
                Issue(
                    path=path,
                    code="duplicate-tags",
                    message=f"Duplicate tags: {', '.join(duplicates)}",
                    severity=IssueSeverity.WARNING,
                    document_id=doc_id,
                )
            )
        return issues
