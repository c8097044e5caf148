"""Serialization engine boundary.

An engine turns a LayoutDocument into bytes and back.  Binary record
grammars live outside this package; ``JsonEngine`` is the reference
engine used for inspection and tests, writing ``document_to_dict`` as
UTF-8 JSON.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Protocol

from layoutkit.errors import LayoutkitError
from layoutkit.layout.models import LayoutDocument
from layoutkit.layout.serialization import document_to_dict, parse_document
from layoutkit.layout.validation import validate_document


log = logging.getLogger(__name__)


class EncodeError(LayoutkitError):
    """Raised when a document cannot be encoded."""

    def __init__(self, message: str, problems: list[str] | None = None) -> None:
        self.problems = problems or []
        super().__init__(message)


class DecodeError(LayoutkitError):
    """Raised when bytes cannot be decoded into a document."""


class SerializationEngine(Protocol):
    def encode(self, doc: LayoutDocument) -> bytes:
        ...

    def decode(self, data: bytes) -> LayoutDocument:
        ...


@dataclass
class JsonEngine:
    """Reference engine: LayoutDocument <-> UTF-8 JSON.

    Integers are exact and reals round-trip bit-for-bit through JSON's
    shortest float repr.  Repetition payloads that would not come back
    unchanged (tuples, non-string dict keys, arbitrary objects) raise
    ``EncodeError``.  With ``validate=True`` the encoder refuses
    documents that ``validate_document`` reports problems for.
    """

    indent: int | None = None
    validate: bool = False

    def encode(self, doc: LayoutDocument) -> bytes:
        if self.validate:
            problems = validate_document(doc)
            if problems:
                raise EncodeError(
                    f"Document has {len(problems)} problem(s): {problems[0]}", problems)
        try:
            data = json.dumps(document_to_dict(doc), indent=self.indent).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodeError(f"Cannot encode document: {e}") from e
        log.info("Encoded %d cells (%d bytes)", len(doc.cells), len(data))
        return data

    def decode(self, data: bytes) -> LayoutDocument:
        try:
            raw = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodeError(f"Not a JSON layout document: {e}") from e
        if not isinstance(raw, dict):
            raise DecodeError(f"Expected a JSON object, got {type(raw).__name__}")
        try:
            doc = parse_document(raw)
        except KeyError as e:
            raise DecodeError(f"Missing field {e}") from e
        except (TypeError, ValueError, AttributeError) as e:
            raise DecodeError(f"Malformed layout document: {e}") from e
        log.info("Decoded %d cells", len(doc.cells))
        return doc
