"""Command line interface: list, show, check and serve the corpus."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from mdcorpus import __version__
from mdcorpus.application.dto.document_dto import ListDocumentsInput
from mdcorpus.config import Settings, get_settings
from mdcorpus.domain.exceptions import CorpusError, InvalidDocument, NotFound
from mdcorpus.interfaces.api.resources.check import report_to_dict
from mdcorpus.logging import configure_logging
from mdcorpus.main import build_container, run_server


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdcorpus",
        description="Read a corpus of Markdown posts with YAML front matter",
    )
    parser.add_argument("--version", action="version", version=f"mdcorpus {__version__}")
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Directory holding the posts (default: MDCORPUS_CONTENT_DIR or source/_posts)",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on malformed files")
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List documents")
    p_list.add_argument("--tag", help="Only documents with this tag")
    p_list.add_argument("--category", help="Only documents in this category")
    p_list.add_argument("--json", action="store_true", help="Print JSON lines")

    p_show = sub.add_parser("show", help="Show one document")
    p_show.add_argument("document_id", help="Document id, e.g. 2020/dryioc")
    p_show.add_argument("--body", action="store_true", help="Print only the raw body")

    p_check = sub.add_parser("check", help="Check corpus well-formedness")
    p_check.add_argument("--json", action="store_true", help="Print the report as JSON")

    p_serve = sub.add_parser("serve", help="Serve the read-only HTTP API")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    updates: dict[str, object] = {}
    if args.content_dir is not None:
        updates["content_dir"] = args.content_dir
    if args.strict:
        updates["strict"] = True
    if args.log_level:
        updates["log_level"] = args.log_level
    return settings.model_copy(update=updates) if updates else settings


async def _cmd_list(settings: Settings, args: argparse.Namespace) -> int:
    container = build_container(settings)
    listing = container.list_documents.execute(
        ListDocumentsInput(tag=args.tag, category=args.category)
    )
    async for s in listing:
        if args.json:
            print(
                json.dumps(
                    {
                        "id": str(s.id),
                        "title": s.title,
                        "date": s.date.isoformat(),
                        "category": s.category,
                        "tags": list(s.tags),
                    },
                    ensure_ascii=False,
                )
            )
        else:
            tags = f" [{', '.join(s.tags)}]" if s.tags else ""
            print(f"{s.date.isoformat()}  {s.id}  {s.title}{tags}")
    return 0


async def _cmd_show(settings: Settings, args: argparse.Namespace) -> int:
    container = build_container(settings)
    if args.body:
        sys.stdout.write(await container.get_document_body.execute(args.document_id))
        return 0
    doc = await container.get_document.execute(args.document_id)
    print(f"id:       {doc.id}")
    print(f"title:    {doc.title}")
    print(f"date:     {doc.date.isoformat()}")
    print(f"category: {doc.category or '-'}")
    print(f"tags:     {', '.join(doc.tags) or '-'}")
    if doc.code_languages:
        print(f"code:     {', '.join(doc.code_languages)}")
    if doc.excerpt:
        print()
        print(doc.excerpt)
    return 0


async def _cmd_check(settings: Settings, args: argparse.Namespace) -> int:
    report = await build_container(settings).check_corpus.execute()
    if args.json:
        print(json.dumps(report_to_dict(report), ensure_ascii=False, indent=2))
    else:
        for issue in report.issues:
            print(f"{issue.path}: {issue.severity}: [{issue.code}] {issue.message}")
        print(
            f"{report.checked} files checked, "
            f"{len(report.errors)} errors, {len(report.warnings)} warnings"
        )
    return 0 if report.ok else 1


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _settings_from_args(args)
    configure_logging(settings.log_level)

    if args.command == "serve":
        run_server(settings, host=args.host, port=args.port)
        return 0

    commands = {"list": _cmd_list, "show": _cmd_show, "check": _cmd_check}
    try:
        return asyncio.run(commands[args.command](settings, args))
    except NotFound as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except InvalidDocument as e:
        print(f"error: invalid document: {e}", file=sys.stderr)
        return 1
    except CorpusError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
