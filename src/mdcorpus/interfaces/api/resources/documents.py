"""Document API resources."""

import falcon.asgi

from mdcorpus.application.dto.document_dto import DocumentOutput, ListDocumentsInput
from mdcorpus.application.use_cases.document.get_document import GetDocumentUseCase
from mdcorpus.application.use_cases.document.get_document_body import (
    GetDocumentBodyUseCase,
)
from mdcorpus.application.use_cases.document.list_documents import ListDocumentsUseCase
from mdcorpus.domain.entities import DocumentSummary
from mdcorpus.domain.exceptions import InvalidDocument, NotFound, ValidationError

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class DocumentsResource:
    """GET /v1/documents - list document summaries, paged by cursor."""

    def __init__(self, list_documents: ListDocumentsUseCase) -> None:
        self._list_documents = list_documents

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List documents. Query: tag, category, cursor, limit."""
        raw_limit = req.get_param("limit")
        try:
            limit = int(raw_limit) if raw_limit else DEFAULT_LIMIT
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "limit must be an integer"}
            return
        if not 1 <= limit <= MAX_LIMIT:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"limit must be between 1 and {MAX_LIMIT}"}
            return

        try:
            listing = self._list_documents.execute(
                ListDocumentsInput(
                    tag=req.get_param("tag"),
                    category=req.get_param("category"),
                    cursor=req.get_param("cursor"),
                    limit=limit,
                )
            )
            items, next_cursor = await listing.page()
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "documents": [_summary_to_dict(s) for s in items],
            "next_cursor": next_cursor,
        }
        resp.status = falcon.HTTP_200


class DocumentResource:
    """GET /v1/documents/{id} - full document as JSON."""

    def __init__(self, get_document: GetDocumentUseCase) -> None:
        self._get_document = get_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Get document by id."""
        try:
            result = await self._get_document.execute(document_id)
            resp.media = _document_to_dict(result)
            resp.status = falcon.HTTP_200
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
        except InvalidDocument as e:
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e)}


class DocumentBodyResource:
    """GET /v1/raw/{id} - raw Markdown body."""

    def __init__(self, get_document_body: GetDocumentBodyUseCase) -> None:
        self._get_document_body = get_document_body

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        try:
            body = await self._get_document_body.execute(document_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        except InvalidDocument as e:
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e)}
            return
        resp.content_type = "text/markdown; charset=utf-8"
        resp.text = body
        resp.status = falcon.HTTP_200


def _summary_to_dict(s: DocumentSummary) -> dict:
    return {
        "id": str(s.id),
        "title": s.title,
        "date": s.date.isoformat(),
        "category": s.category,
        "tags": list(s.tags),
        "has_excerpt": s.has_excerpt,
    }


def _document_to_dict(d: DocumentOutput) -> dict:
    return {
        "id": d.id,
        "title": d.title,
        "date": d.date.isoformat(),
        "category": d.category,
        "tags": d.tags,
        "excerpt": d.excerpt,
        "body": d.body,
        "code_languages": d.code_languages,
        "source_hash": d.source_hash.hex(),
    }
