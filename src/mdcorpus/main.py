"""Application entry point and composition root."""

from dataclasses import dataclass

from falcon.asgi import App

from mdcorpus.application.use_cases.corpus.check_corpus import CheckCorpusUseCase
from mdcorpus.application.use_cases.document.get_document import GetDocumentUseCase
from mdcorpus.application.use_cases.document.get_document_body import (
    GetDocumentBodyUseCase,
)
from mdcorpus.application.use_cases.document.list_documents import ListDocumentsUseCase
from mdcorpus.config import Settings, get_settings
from mdcorpus.infrastructure.document_parsers import parse_file
from mdcorpus.infrastructure.persistence.filesystem.document_repository import (
    FileSystemDocumentRepository,
)
from mdcorpus.interfaces.api.app import create_app
from mdcorpus.interfaces.api.resources.check import CheckResource
from mdcorpus.interfaces.api.resources.documents import (
    DocumentBodyResource,
    DocumentResource,
    DocumentsResource,
)
from mdcorpus.interfaces.api.resources.health import HealthResource


@dataclass
class Container:
    """Wired use cases over one corpus."""

    repository: FileSystemDocumentRepository
    list_documents: ListDocumentsUseCase
    get_document: GetDocumentUseCase
    get_document_body: GetDocumentBodyUseCase
    check_corpus: CheckCorpusUseCase


def build_container(settings: Settings) -> Container:
    """Composition root - build use cases for the configured content directory."""
    repository = FileSystemDocumentRepository(
        settings.content_dir,
        parser=parse_file,
        strict=settings.strict,
    )
    return Container(
        repository=repository,
        list_documents=ListDocumentsUseCase(document_repository=repository),
        get_document=GetDocumentUseCase(document_repository=repository),
        get_document_body=GetDocumentBodyUseCase(document_repository=repository),
        check_corpus=CheckCorpusUseCase(corpus_source=repository, parser=parse_file),
    )


def create_mdcorpus_app(settings: Settings | None = None) -> App:
    """Build the Falcon app with all dependencies."""
    settings = settings or get_settings()
    container = build_container(settings)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        documents_resource=DocumentsResource(container.list_documents),
        document_resource=DocumentResource(container.get_document),
        document_body_resource=DocumentBodyResource(container.get_document_body),
        check_resource=CheckResource(container.check_corpus),
        health_resource=HealthResource(container.repository.exists),
        cors_origins=cors_origins,
    )


def run_server(settings: Settings, host: str | None = None, port: int | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_mdcorpus_app(settings)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    from mdcorpus.interfaces.cli.commands import run

    return run(argv)
