"""CSS class name helpers for sprite items."""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from sprite_maker.constants import CLASS_NAME_FALLBACK

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_-]+")
_LEADING_DIGIT = re.compile(r"^\d")


def sanitize_class_name(raw: str) -> str:
    """
    Turn an arbitrary string into a valid CSS class name.

    Runs of unsupported characters collapse to a single hyphen, and names
    that would start with a digit get an underscore prefix.
    """
    name = _INVALID_CHARS.sub("-", raw).strip("-").lower()
    if not name:
        return CLASS_NAME_FALLBACK
    if _LEADING_DIGIT.match(name):
        name = f"_{name}"
    return name


def allocate_class_names(
    sources: Mapping[str, Path],
    prefix: str,
) -> dict[str, str]:
    """
    Map each item id to a unique class name derived from its file stem.

    Collisions get a numeric suffix in id order.
    """
    names: dict[str, str] = {}
    taken: set[str] = set()
    for item_id, path in sources.items():
        stem = sanitize_class_name(Path(path).stem)
        base = f"{sanitize_class_name(prefix)}-{stem}" if prefix else stem
        candidate = base
        suffix = 1
        while candidate in taken:
            candidate = f"{base}-{suffix}"
            suffix += 1
        taken.add(candidate)
        names[item_id] = candidate
    return names
