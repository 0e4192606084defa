"""Domain exceptions."""


class CorpusError(Exception):
    """Base exception for mdcorpus."""

    pass


class NotFound(CorpusError):
    """Requested document was not found."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class InvalidDocument(CorpusError):
    """File could not be turned into a document."""

    pass


class InvalidFrontMatter(InvalidDocument):
    """Front matter is missing, malformed, or lacks a required field."""

    pass


class DuplicateDocument(CorpusError):
    """Two files in the corpus map to the same document id."""

    pass


class ValidationError(CorpusError):
    """Validation failed for input data."""

    pass
