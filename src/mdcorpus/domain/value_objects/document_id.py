"""Document identifier derived from the file path inside the corpus."""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath


@dataclass(frozen=True, order=True)
class DocumentId:
    """Relative POSIX path of a post without its extension, e.g. ``2020/dryioc``."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Document id must not be empty")
        if "\\" in self.value:
            raise ValueError("Document id must use '/' as separator")
        path = PurePosixPath(self.value)
        if path.is_absolute():
            raise ValueError("Document id must be relative")
        parts = self.value.split("/")
        if any(part in ("", ".", "..") for part in parts):
            raise ValueError(f"Invalid document id segment in {self.value!r}")

    @classmethod
    def from_path(cls, root: Path, path: Path) -> "DocumentId":
        """Build id from a file path relative to the corpus root."""
        relative = path.relative_to(root).with_suffix("")
        return cls(relative.as_posix())

    def __str__(self) -> str:
        return self.value
