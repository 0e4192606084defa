"""Pytest fixtures for mdcorpus tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date
from pathlib import Path

import pytest

from mdcorpus.domain.entities import Document, DocumentSummary
from mdcorpus.domain.value_objects import DocumentId, SourceHash


POST_DRYIOC = """---
title: Dependency injection with DryIoc
date: 2020-05-10 10:00:00
category: ASP.NET Core
tags:
  - dryioc
  - ioc
  - aspnetcore
---
DryIoc is a fast, small, full-featured IoC container for .NET.

<!-- more -->

```cs
var container = new Container();
container.Register<IService, SomeService>();
```
"""

POST_POLLY = """---
title: HTTP client resiliency with Polly
date: 2020-06-01
categories:
  - ASP.NET Core
tags:
  - polly
  - httpclient
---
```json
{ "Retry": 3 }
```

```bash
dotnet add package Polly
```
"""

POST_RABBITMQ = """---
title: RabbitMQ concepts
date: 2021-01-15
category: Messaging
tags: rabbitmq
---
Exchanges, queues and bindings.
"""


def make_document(
    doc_id: str = "post",
    *,
    title: str = "A post",
    day: date = date(2020, 1, 1),
    category: str | None = None,
    tags: tuple[str, ...] = (),
    body: str = "Body\n",
    excerpt_marker: int | None = None,
) -> Document:
    """Build a Document without touching the filesystem."""
    return Document(
        id=DocumentId(doc_id),
        title=title,
        date=day,
        body=body,
        source_path=Path(f"{doc_id}.md"),
        source_hash=SourceHash.of(body.encode()),
        category=category,
        tags=tags,
        excerpt_marker=excerpt_marker,
        excerpt_marker_count=1 if excerpt_marker is not None else 0,
    )


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self, documents: list[Document] | None = None) -> None:
        self._by_id: dict[DocumentId, Document] = {}
        self.list_calls = 0
        for doc in documents or []:
            self.add(doc)

    def add(self, document: Document) -> None:
        self._by_id[document.id] = document

    async def get_by_id(self, document_id: DocumentId) -> Document | None:
        return self._by_id.get(document_id)

    async def list(
        self,
        *,
        tag: str | None = None,
        category: str | None = None,
        after: DocumentId | None = None,
    ) -> AsyncIterator[DocumentSummary]:
        self.list_calls += 1
        for doc_id in sorted(self._by_id):
            doc = self._by_id[doc_id]
            if after is not None and doc_id <= after:
                continue
            if tag and tag.casefold() not in {t.casefold() for t in doc.tags}:
                continue
            if category and (doc.category or "").casefold() != category.casefold():
                continue
            yield doc.summary()


@pytest.fixture
def fake_repository() -> FakeDocumentRepository:
    return FakeDocumentRepository(
        [
            make_document("a-first", title="First", tags=("x", "y"), category="One"),
            make_document("b-second", title="Second", tags=("y",), category="Two"),
            make_document("c-third", title="Third", body="Teaser\n<!-- more -->\nRest\n", excerpt_marker=7),
        ]
    )


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Directory with three well-formed posts, one of them nested."""
    root = tmp_path / "_posts"
    (root / "2021").mkdir(parents=True)
    (root / "dryioc.md").write_text(POST_DRYIOC, encoding="utf-8")
    (root / "polly.markdown").write_text(POST_POLLY, encoding="utf-8")
    (root / "2021" / "rabbitmq.md").write_text(POST_RABBITMQ, encoding="utf-8")
    return root
