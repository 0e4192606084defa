"""API resource tests."""

from pathlib import Path

from falcon.testing import TestClient

from mdcorpus.config import Settings
from mdcorpus.main import create_mdcorpus_app


class TestDocumentsResource:
    """GET /v1/documents."""

    def test_list_all(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/documents")
        assert result.status_code == 200
        ids = [d["id"] for d in result.json["documents"]]
        assert ids == ["2021/rabbitmq", "dryioc", "polly"]
        assert result.json["next_cursor"] is None
        dryioc = result.json["documents"][1]
        assert dryioc == {
            "id": "dryioc",
            "title": "Dependency injection with DryIoc",
            "date": "2020-05-10",
            "category": "ASP.NET Core",
            "tags": ["dryioc", "ioc", "aspnetcore"],
            "has_excerpt": True,
        }

    def test_paging(self, client: TestClient) -> None:
        first = client.simulate_get("/v1/documents", params={"limit": "2"})
        assert [d["id"] for d in first.json["documents"]] == ["2021/rabbitmq", "dryioc"]
        assert first.json["next_cursor"] == "dryioc"

        second = client.simulate_get(
            "/v1/documents", params={"limit": "2", "cursor": first.json["next_cursor"]}
        )
        assert [d["id"] for d in second.json["documents"]] == ["polly"]
        assert second.json["next_cursor"] is None

    def test_filters(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/documents", params={"tag": "polly"})
        assert [d["id"] for d in result.json["documents"]] == ["polly"]
        result = client.simulate_get("/v1/documents", params={"category": "Messaging"})
        assert [d["id"] for d in result.json["documents"]] == ["2021/rabbitmq"]

    def test_invalid_limit(self, client: TestClient) -> None:
        for value in ("0", "101", "abc"):
            result = client.simulate_get("/v1/documents", params={"limit": value})
            assert result.status_code == 400
            assert "limit" in result.json["error"]

    def test_invalid_cursor(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/documents", params={"cursor": "../x"})
        assert result.status_code == 400
        assert "cursor" in result.json["error"]


class TestDocumentResource:
    """GET /v1/documents/{id}."""

    def test_nested_id(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/documents/2021/rabbitmq")
        assert result.status_code == 200
        assert result.json["id"] == "2021/rabbitmq"
        assert result.json["title"] == "RabbitMQ concepts"
        assert result.json["excerpt"] is None
        assert result.json["body"] == "Exchanges, queues and bindings.\n"
        assert len(result.json["source_hash"]) == 32

    def test_excerpt_and_languages(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/documents/dryioc")
        assert result.json["excerpt"].startswith("DryIoc is a fast")
        assert result.json["code_languages"] == ["cs"]

    def test_not_found(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/documents/missing")
        assert result.status_code == 404
        assert result.json["error"] == "Document not found"

    def test_impossible_date_skipped_in_listing(
        self, client: TestClient, corpus_dir: Path
    ) -> None:
        (corpus_dir / "typo.md").write_text("---\ntitle: T\ndate: 2020-02-30\n---\n")
        result = client.simulate_get("/v1/documents")
        assert result.status_code == 200
        assert [d["id"] for d in result.json["documents"]] == ["2021/rabbitmq", "dryioc", "polly"]
        result = client.simulate_get("/v1/documents/typo")
        assert result.status_code == 422

    def test_invalid_document(self, client: TestClient, corpus_dir: Path) -> None:
        (corpus_dir / "broken.md").write_text("---\ntitle: T\ndate: never\n---\n")
        result = client.simulate_get("/v1/documents/broken")
        assert result.status_code == 422
        assert "date" in result.json["error"]


class TestDocumentBodyResource:
    """GET /v1/raw/{id}."""

    def test_body_is_markdown(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/raw/dryioc")
        assert result.status_code == 200
        assert result.headers["content-type"].startswith("text/markdown")
        assert "<!-- more -->" in result.text
        assert "```cs" in result.text

    def test_not_found(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/raw/2021/missing")
        assert result.status_code == 404


class TestCheckResource:
    """GET /v1/check."""

    def test_clean(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/check")
        assert result.status_code == 200
        assert result.json == {"ok": True, "checked": 3, "issues": []}

    def test_issues(self, client: TestClient, corpus_dir: Path) -> None:
        (corpus_dir / "tags.md").write_text("---\ntitle: T\ndate: 2020-01-01\ntags: [a, a]\n---\n")
        result = client.simulate_get("/v1/check")
        assert result.json["ok"] is True
        [issue] = result.json["issues"]
        assert issue["code"] == "duplicate-tags"
        assert issue["severity"] == "warning"
        assert issue["document_id"] == "tags"

    def test_impossible_date(self, client: TestClient, corpus_dir: Path) -> None:
        (corpus_dir / "typo.md").write_text("---\ntitle: T\ndate: 2020-02-30\n---\n")
        result = client.simulate_get("/v1/check")
        assert result.status_code == 200
        assert result.json["ok"] is False
        assert [i["code"] for i in result.json["issues"]] == ["invalid-front-matter"]


class TestCors:
    def test_allowed_origin_echoed(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/health", headers={"Origin": "http://blog.example"}
        )
        assert result.headers["access-control-allow-origin"] == "http://blog.example"

    def test_unknown_origin_not_allowed(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/health", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in result.headers

    def test_preflight(self, client: TestClient) -> None:
        result = client.simulate_options(
            "/v1/documents", headers={"Origin": "http://blog.example"}
        )
        assert result.status_code == 200
        assert result.headers["access-control-allow-methods"] == "GET, OPTIONS"


def test_ready_reports_missing_content_dir(tmp_path: Path) -> None:
    app = create_mdcorpus_app(Settings(_env_file=None, content_dir=tmp_path / "missing"))
    result = TestClient(app).simulate_get("/v1/health/ready")
    assert result.status_code == 503
