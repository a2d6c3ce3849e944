from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextSource:
    text: str


@dataclass(frozen=True, slots=True)
class BinarySource:
    data: bytes


@dataclass(frozen=True, slots=True)
class CodeSource:
    code: str


AssetSource = TextSource | BinarySource | CodeSource


@dataclass(frozen=True, slots=True)
class Asset:
    """One emitted output file. ``source`` is ``None`` when the host gave no content."""

    identifier: str
    source: AssetSource | None = None

    @classmethod
    def text(cls, identifier: str, text: str) -> Asset:
        return cls(identifier, TextSource(text))

    @classmethod
    def binary(cls, identifier: str, data: bytes | bytearray | memoryview) -> Asset:
        return cls(identifier, BinarySource(bytes(data)))

    @classmethod
    def code(cls, identifier: str, code: str) -> Asset:
        return cls(identifier, CodeSource(code))

    @classmethod
    def from_host(cls, identifier: str, raw: object) -> Asset:
        if isinstance(raw, Asset):
            return raw
        if isinstance(raw, str):
            return cls.text(identifier, raw)
        if isinstance(raw, (bytes, bytearray, memoryview)):
            return cls.binary(identifier, raw)

        source = _read_field(raw, "source")
        if isinstance(source, str):
            return cls.text(identifier, source)
        if isinstance(source, (bytes, bytearray, memoryview)):
            return cls.binary(identifier, source)

        code = _read_field(raw, "code")
        if isinstance(code, str):
            return cls.code(identifier, code)
        return cls(identifier)


def _read_field(raw: object, name: str) -> object:
    if isinstance(raw, Mapping):
        return raw.get(name)
    return getattr(raw, name, None)
