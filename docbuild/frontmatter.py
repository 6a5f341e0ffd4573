"""Front-matter parsing for Markdown sources."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import FrontMatterError
from .models import FrontMatter

OPENING_DELIMITER = "---"
CLOSING_DELIMITERS = ("---", "...")
_BOM = "\ufeff"


def parse(raw_text: str, *, source: Path | None = None) -> FrontMatter:
    """Split ``raw_text`` into YAML attributes and the Markdown body.

    The block must start on the very first line (an optional BOM is allowed)
    and ends at the next ``---`` or ``...`` line. Text without a block is
    returned untouched with empty attributes.

    Raises:
        FrontMatterError: the block is never closed, is not valid YAML, or
            does not describe a mapping with string keys.
    """
    lines = raw_text.splitlines(keepends=True)
    if not lines or lines[0].lstrip(_BOM).rstrip() != OPENING_DELIMITER:
        return FrontMatter(attributes={}, body=raw_text)

    closing_index = _find_closing(lines)
    if closing_index is None:
        raise FrontMatterError("front matter is not closed with '---'", source=source)

    block = "".join(lines[1:closing_index])
    body = "".join(lines[closing_index + 1 :])
    return FrontMatter(attributes=_load_attributes(block, source), body=body)


def _find_closing(lines: List[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].rstrip() in CLOSING_DELIMITERS:
            return index
    return None


def _load_attributes(block: str, source: Path | None) -> Dict[str, Any]:
    if not block.strip():
        return {}
    try:
        loaded = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"invalid front matter: {exc}", source=source) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise FrontMatterError(
            f"front matter must be a mapping, got {type(loaded).__name__}",
            source=source,
        )
    non_string = [key for key in loaded if not isinstance(key, str)]
    if non_string:
        raise FrontMatterError(
            f"front matter keys must be strings, got {non_string[0]!r}",
            source=source,
        )
    return loaded


__all__ = ["CLOSING_DELIMITERS", "OPENING_DELIMITER", "parse"]
