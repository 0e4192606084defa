"""Corpus check endpoint."""

import falcon.asgi

from mdcorpus.application.dto.corpus_dto import CorpusReport
from mdcorpus.application.use_cases.corpus.check_corpus import CheckCorpusUseCase


class CheckResource:
    """GET /v1/check - run the well-formedness check over the whole corpus."""

    def __init__(self, check_corpus: CheckCorpusUseCase) -> None:
        self._check_corpus = check_corpus

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        report = await self._check_corpus.execute()
        resp.media = report_to_dict(report)
        resp.status = falcon.HTTP_200


def report_to_dict(report: CorpusReport) -> dict:
    return {
        "ok": report.ok,
        "checked": report.checked,
        "issues": [
            {
                "path": str(i.path),
                "document_id": i.document_id,
                "code": i.code,
                "severity": str(i.severity),
                "message": i.message,
            }
            for i in report.issues
        ],
    }
