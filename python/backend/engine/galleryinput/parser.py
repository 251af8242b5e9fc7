"""Reads galleries from text and JSON, and validates solve requests.

Everything here works on user input, so failures raise
:class:`InvalidRequest` rather than :class:`ContractViolation`.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from backend.models.errors import ContractViolation, InvalidRequest
from backend.models.gallery import Gallery

_SEPARATORS = re.compile(r"[,\s]+")


def parse_row(text: str) -> list[int]:
    """Parse ``"1, 9 1"`` into ``[1, 9, 1]``."""
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    if not tokens:
        raise InvalidRequest("A gallery row needs at least one room value.")
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise InvalidRequest(
            f"Room values must be whole numbers, got {text!r}."
        ) from None


def parse_gallery(top: str, bottom: str) -> Gallery:
    return gallery_from_rows([parse_row(top), parse_row(bottom)])


def gallery_from_rows(rows: Any) -> Gallery:
    """Build a gallery from untrusted rows, reporting shape errors as input errors."""
    if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
        raise InvalidRequest("A gallery must be a list of two lists of room values.")
    try:
        return Gallery.from_rows(rows)
    except ContractViolation as exc:
        raise InvalidRequest(str(exc)) from None


def gallery_from_data(data: dict[str, Any]) -> Gallery:
    """Accepts ``{"top": [...], "bottom": [...]}`` or ``{"gallery": [[...], [...]]}``."""
    if "gallery" in data:
        return gallery_from_rows(data["gallery"])
    if "top" in data and "bottom" in data:
        return gallery_from_rows([data["top"], data["bottom"]])
    raise InvalidRequest(
        "Gallery JSON needs either a 'gallery' matrix or 'top' and 'bottom' rows."
    )


def load_gallery(path: Path) -> Gallery:
    try:
        data = json.loads(path.read_text())
    except OSError as exc:
        raise InvalidRequest(f"Cannot read {path}: {exc.strerror}") from None
    except json.JSONDecodeError as exc:
        raise InvalidRequest(f"{path} is not valid JSON: {exc.msg}") from None
    if not isinstance(data, dict):
        raise InvalidRequest(f"{path} must hold a JSON object.")
    return gallery_from_data(data)


def validate_rooms_to_close(gallery: Gallery, rooms_to_close: int) -> int:
    """Reject room counts the frontends refuse to solve for."""
    if rooms_to_close <= 0:
        raise InvalidRequest("Rooms to close should be more than 0.")
    if rooms_to_close > gallery.columns:
        raise InvalidRequest(
            f"Rooms to close should be at most the gallery length "
            f"({gallery.columns})."
        )
    return rooms_to_close
