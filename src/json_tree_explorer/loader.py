"""Document source: turns JSON or JSON-Lines text into a loaded document.

The tree model itself never reads files or parses text; this module is the
collaborator that does, and that derives the large-document flag from the
source size.

JSON-Lines input becomes an array with one element per non-blank line.
Lines that fail to parse are skipped and reported on the result; loading
only fails when every non-blank line failed.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from json_tree_explorer.config import ExplorerConfig
from json_tree_explorer.exceptions import DocumentLoadError

__all__ = [
    "LineError",
    "LoadedDocument",
    "format_file_size",
    "is_jsonl_name",
    "is_supported_file",
    "load_path",
    "load_text",
    "parse_json",
    "parse_jsonl",
]

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = (".json",)
_JSONL_SUFFIXES = (".jsonl", ".ndjson")
_JSON_CONTENT_TYPES = ("application/json", "application/x-ndjson", "application/jsonl")
_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


@dataclass(frozen=True, slots=True)
class LineError:
    """A JSON-Lines line that failed to parse (1-based line number)."""

    line_number: int
    message: str


@dataclass(frozen=True, slots=True)
class LoadedDocument:
    """A parsed document plus the facts the tree model needs about its source.

    Attributes:
        value:         The parsed JSON value (an array of records for JSON-Lines).
        size_bytes:    Size of the source in bytes.
        is_large:      True when size_bytes exceeds the configured threshold.
        name:          Source file name, or "" for in-memory text.
        is_jsonl:      True when the source was JSON-Lines.
        skipped_lines: Lines that failed to parse, in file order.
    """

    value: Any
    size_bytes: int
    is_large: bool
    name: str = ""
    is_jsonl: bool = False
    skipped_lines: tuple[LineError, ...] = ()

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_lines)

    @property
    def root_label(self) -> str:
        """Name shown for the synthetic root node."""
        return "records" if self.is_jsonl else "root"


def format_file_size(size_bytes: int) -> str:
    """Format a byte count for display: ``0 Bytes``, ``1.5 KB``, ``5 MB``.

    Uses 1024 as the unit base and at most two decimals, trailing zeros trimmed.
    """
    if size_bytes <= 0:
        return "0 Bytes"
    exponent = min(int(math.log(size_bytes, 1024)), len(_SIZE_UNITS) - 1)
    # log() can land just below an exact power of 1024
    if exponent + 1 < len(_SIZE_UNITS) and size_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    scaled = round(size_bytes / 1024**exponent, 2)
    text = f"{scaled:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[exponent]}"


def is_jsonl_name(name: str) -> bool:
    return name.lower().endswith(_JSONL_SUFFIXES)


def is_supported_file(name: str, content_type: str | None = None) -> bool:
    """Return True for JSON / JSON-Lines file names or a JSON content type."""
    if content_type and content_type.split(";")[0].strip().lower() in _JSON_CONTENT_TYPES:
        return True
    return name.lower().endswith(_JSON_SUFFIXES + _JSONL_SUFFIXES)


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are not JSON.
    raise ValueError(f"Unexpected token {token}")


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def parse_json(text: str) -> Any:
    """Parse a whole JSON document.

    Raises:
        DocumentLoadError: With message ``"Invalid JSON file: <reason>"``.
    """
    try:
        return _loads(text)
    except (ValueError, RecursionError) as exc:
        raise DocumentLoadError(f"Invalid JSON file: {exc}") from exc


def parse_jsonl(text: str) -> tuple[list[Any], list[LineError]]:
    """Parse JSON-Lines text line by line.

    Blank lines are ignored.  Returns the parsed records and the errors of the
    lines that failed.

    Raises:
        DocumentLoadError: If there were non-blank lines and all of them failed.
    """
    records: list[Any] = []
    errors: list[LineError] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            records.append(_loads(line))
        except (ValueError, RecursionError) as exc:
            errors.append(LineError(line_number=line_number, message=str(exc)))

    if errors and not records:
        msg = f"Invalid JSONL file: all {len(errors)} lines failed to parse"
        raise DocumentLoadError(msg)
    if errors:
        logger.warning(
            "Skipped %d unparseable JSONL line(s), first at line %d: %s",
            len(errors),
            errors[0].line_number,
            errors[0].message,
        )
    return records, errors


def load_text(
    text: str,
    name: str = "",
    is_jsonl: bool | None = None,
    size_bytes: int | None = None,
    config: ExplorerConfig | None = None,
) -> LoadedDocument:
    """Parse in-memory text into a LoadedDocument.

    Args:
        text:       The document text.
        name:       Source name; a ``.jsonl``/``.ndjson`` suffix selects JSON-Lines.
        is_jsonl:   Force JSON-Lines on or off, overriding the name.
        size_bytes: Source size; defaults to the UTF-8 length of ``text``.
        config:     Supplies the large-document threshold.

    Raises:
        DocumentLoadError: If the text is not valid JSON / JSON-Lines.
    """
    cfg = config if config is not None else ExplorerConfig()
    jsonl = is_jsonl if is_jsonl is not None else is_jsonl_name(name)
    size = size_bytes if size_bytes is not None else len(text.encode("utf-8"))

    skipped: list[LineError] = []
    if jsonl:
        value, skipped = parse_jsonl(text)
    else:
        value = parse_json(text)

    document = LoadedDocument(
        value=value,
        size_bytes=size,
        is_large=cfg.is_large(size),
        name=name,
        is_jsonl=jsonl,
        skipped_lines=tuple(skipped),
    )
    logger.info(
        "Loaded %s (%s%s%s)",
        name or "<text>",
        format_file_size(size),
        ", large" if document.is_large else "",
        f", {len(skipped)} line(s) skipped" if skipped else "",
    )
    return document


def load_path(
    path: str | Path,
    content_type: str | None = None,
    config: ExplorerConfig | None = None,
) -> LoadedDocument:
    """Read and parse a JSON or JSON-Lines file.

    Raises:
        DocumentLoadError: For unsupported file types, unreadable files or
            invalid content.
    """
    source = Path(path)
    if not is_supported_file(source.name, content_type):
        raise DocumentLoadError("Please drop a valid JSON file (.json)")
    try:
        raw = source.read_bytes()
        text = raw.decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError("Failed to read file") from exc
    return load_text(text, name=source.name, size_bytes=len(raw), config=config)
