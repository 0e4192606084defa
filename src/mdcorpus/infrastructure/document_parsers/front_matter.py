"""YAML front matter: split it off the body and normalize its fields."""

from datetime import date, datetime

import yaml

from mdcorpus.domain.exceptions import InvalidFrontMatter
from mdcorpus.infrastructure.document_parsers.metadata_keys import (
    CATEGORY_KEYS,
    normalize_label,
)

_OPENER = "---"
_CLOSERS = ("---", "...")
_DATE_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d")


def split_front_matter(text: str) -> tuple[dict[str, object], str]:
    """Return the parsed front matter mapping and the body that follows it."""
    text = text.removeprefix("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _OPENER:
        raise InvalidFrontMatter("File does not start with a '---' front matter block")
    for end in range(1, len(lines)):
        if lines[end].rstrip() in _CLOSERS:
            break
    else:
        raise InvalidFrontMatter("Front matter block is not closed")

    raw = "".join(lines[1:end])
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise InvalidFrontMatter(f"Malformed YAML in front matter: {e}") from e
    except ValueError as e:
        # PyYAML's timestamp constructor rejects impossible dates like 2020-02-30
        raise InvalidFrontMatter(f"Invalid value in front matter: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidFrontMatter("Front matter must be a mapping")
    return {str(k): v for k, v in data.items()}, "".join(lines[end + 1 :])


def parse_title(value: object) -> str:
    if isinstance(value, (list, dict)):
        raise InvalidFrontMatter("Field 'title' must be a string")
    title = normalize_label(value)
    if not title:
        raise InvalidFrontMatter("Missing required field 'title'")
    return title


def parse_date(value: object) -> date:
    """Accept a YAML date/datetime or a date string; the time of day is dropped."""
    if value is None or value == "":
        raise InvalidFrontMatter("Missing required field 'date'")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        s = value.strip()
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(s, fmt).date()
            except ValueError:
                continue
        try:
            return datetime.fromisoformat(s).date()
        except ValueError:
            pass
    raise InvalidFrontMatter(f"Field 'date' is not a valid date: {value!r}")


def parse_tags(value: object) -> tuple[str, ...]:
    """Tags in authored order; duplicates are kept, blank entries dropped."""
    if value is None:
        return ()
    if isinstance(value, dict):
        raise InvalidFrontMatter("Field 'tags' must be a list or a string")
    items = value if isinstance(value, list) else [value]
    tags: list[str] = []
    for item in items:
        if isinstance(item, (list, dict)):
            raise InvalidFrontMatter("Field 'tags' must contain plain values")
        label = normalize_label(item)
        if label:
            tags.append(label)
    return tuple(tags)


def parse_category(meta: dict[str, object]) -> str | None:
    """First value of ``category`` or ``categories``; None when absent or blank."""
    for key in CATEGORY_KEYS:
        value = meta.get(key)
        while isinstance(value, list):
            value = value[0] if value else None
        if isinstance(value, dict):
            raise InvalidFrontMatter(f"Field {key!r} must be a string or a list")
        label = normalize_label(value)
        if label:
            return label
    return None
