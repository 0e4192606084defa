"""Source file hash for detecting unstable reads."""

import hashlib
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceHash:
    """MD5 hash of the raw file bytes (binary)."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != 16:
            raise ValueError("MD5 hash must be 16 bytes")

    @classmethod
    def of(cls, data: bytes) -> "SourceHash":
        return cls(hashlib.md5(data).digest())

    def hex(self) -> str:
        return self.value.hex()
