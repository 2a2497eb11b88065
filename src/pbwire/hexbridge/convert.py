"""Conversion of hex-carrying strings into byte buffers.

JSON has no byte type, so payloads built from JSON carry raw bytes as hex
text. Before encoding, HexBridge walks the payload and asks each of its
rules whether a string should become bytes. Two rules ship:

- SentinelRule: the string starts with ``"hex->"`` and the remainder is hex
- PathSuffixRule: the string sits at a path ending in given segments
  (``("5", "2")`` by default) and is hex as a whole

The path rule is tied to one message shape; callers that know their byte
fields should pass their own rules instead of relying on it.

Paths are tuples of string segments: mapping keys as written, and list
indices counted from 1.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Tuple

from ..framing import is_hex_string

HEX_SENTINEL = "hex->"

PathSegments = Tuple[str, ...]


class HexRule(ABC):
    """Decides whether a string value carries raw bytes."""

    @abstractmethod
    def convert(self, path: PathSegments, text: str) -> Optional[bytes]:
        """Return the bytes carried by ``text`` at ``path``, or None to leave it alone."""


class SentinelRule(HexRule):
    """Convert strings written as ``<prefix><hex digits>``.

    Example:
        >>> SentinelRule().convert((), "hex->6869")
        b'hi'
    """

    def __init__(self, prefix: str = HEX_SENTINEL) -> None:
        self.prefix = prefix

    def convert(self, path: PathSegments, text: str) -> Optional[bytes]:
        if not text.startswith(self.prefix):
            return None
        digits = text[len(self.prefix) :]
        if not is_hex_string(digits):
            return None
        return bytes.fromhex(digits)

    def __repr__(self) -> str:
        return f"SentinelRule(prefix={self.prefix!r})"


class PathSuffixRule(HexRule):
    """Convert hex strings whose path ends with ``suffix``.

    Example:
        >>> PathSuffixRule(("5", "2")).convert(("3", "5", "2"), "ff00")
        b'\\xff\\x00'
    """

    def __init__(self, suffix: Iterable[str] = ("5", "2")) -> None:
        self.suffix: PathSegments = tuple(str(segment) for segment in suffix)

    def convert(self, path: PathSegments, text: str) -> Optional[bytes]:
        if len(path) < len(self.suffix) or path[len(path) - len(self.suffix) :] != self.suffix:
            return None
        if not is_hex_string(text):
            return None
        return bytes.fromhex(text)

    def __repr__(self) -> str:
        return f"PathSuffixRule(suffix={self.suffix!r})"


class PredicateRule(HexRule):
    """Convert hex strings selected by a caller-supplied predicate."""

    def __init__(self, predicate: Callable[[PathSegments, str], bool]) -> None:
        self.predicate = predicate

    def convert(self, path: PathSegments, text: str) -> Optional[bytes]:
        if not self.predicate(path, text) or not is_hex_string(text):
            return None
        return bytes.fromhex(text)


DEFAULT_RULES: Tuple[HexRule, ...] = (PathSuffixRule(("5", "2")), SentinelRule())


class HexBridge:
    """Pre-encode transform applying hex rules throughout a payload.

    Mappings are rebuilt with decimal-string keys turned into ints; lists
    and tuples become lists. Bytes, numbers, booleans and None pass through.

    Attributes:
        rules: Rules consulted in order for each string; first match wins

    Example:
        >>> HexBridge().transform({"1": "hex->6869", "2": "plain"})
        {1: b'hi', 2: 'plain'}
    """

    def __init__(self, rules: Iterable[HexRule] = DEFAULT_RULES) -> None:
        self.rules: Tuple[HexRule, ...] = tuple(rules)

    def transform(self, data: Any, path: PathSegments = ()) -> Any:
        if isinstance(data, str):
            return self._convert_string(path, data)

        if isinstance(data, (list, tuple)):
            return [self.transform(item, path + (str(index),)) for index, item in enumerate(data, 1)]

        if isinstance(data, Mapping):
            return {
                _normalize_key(key): self.transform(value, path + (str(key),))
                for key, value in data.items()
            }

        return data

    def _convert_string(self, path: PathSegments, text: str) -> Any:
        for rule in self.rules:
            converted = rule.convert(path, text)
            if converted is not None:
                return converted
        return text


def _normalize_key(key: Any) -> Any:
    if isinstance(key, str) and key.strip().isdecimal():
        return int(key)
    return key


def prepare_payload(data: Any, bridge: Optional[HexBridge] = None) -> Any:
    """Apply ``bridge`` (default rules when None) to a payload."""
    return (bridge or HexBridge()).transform(data)


def to_jsonable(value: Any) -> Any:
    """Render a decoded message as JSON-compatible data.

    Tags become string keys and bytes become ``"hex->..."`` strings, so the
    result passes back through HexBridge unchanged in meaning.

    Example:
        >>> to_jsonable({1: b"\\x01\\x02", 2: [3, "x"]})
        {'1': 'hex->0102', '2': [3, 'x']}
    """
    if isinstance(value, Mapping):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    if isinstance(value, (bytes, bytearray, memoryview)):
        return HEX_SENTINEL + bytes(value).hex()
    return value
