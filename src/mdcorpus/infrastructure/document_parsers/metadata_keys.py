"""Front matter keys understood by the Markdown parser."""

# Hexo writes ``categories``; a single ``category`` is accepted as well.
CATEGORY_KEYS = ("category", "categories")

KNOWN_KEYS = frozenset({"title", "date", "tags", *CATEGORY_KEYS})


def normalize_label(value: object) -> str:
    """Convert a scalar front matter value to a stripped label string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()
