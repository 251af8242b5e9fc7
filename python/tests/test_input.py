"""Gallery parsing, loading, validation and random generation."""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from backend import config
from backend.engine.gallerygenerator import GalleryGenerator
from backend.engine.galleryinput import (
    gallery_from_data,
    load_gallery,
    parse_gallery,
    parse_row,
    validate_rooms_to_close,
)
from backend.models.errors import InvalidRequest
from backend.models.gallery import Gallery


# -- parsing ------------------------------------------------------------------


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1,9,1", [1, 9, 1]),
        ("1, 9, 1", [1, 9, 1]),
        ("  4 -2   7 ", [4, -2, 7]),
        ("5", [5]),
    ],
)
def test_parse_row(text: str, expected: list[int]) -> None:
    assert parse_row(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "1,x,3", "1.5 2"])
def test_parse_row_rejects_garbage(text: str) -> None:
    with pytest.raises(InvalidRequest):
        parse_row(text)


def test_parse_gallery() -> None:
    gallery = parse_gallery("1 9 1", "1,1,9")
    assert gallery == Gallery.from_rows([[1, 9, 1], [1, 1, 9]])


def test_parse_gallery_reports_ragged_rows_as_input_error() -> None:
    with pytest.raises(InvalidRequest):
        parse_gallery("1 2 3", "4 5")


# -- JSON ---------------------------------------------------------------------


def test_gallery_from_data_formats() -> None:
    expected = Gallery.from_rows([[1, 2], [3, 4]])
    assert gallery_from_data({"top": [1, 2], "bottom": [3, 4]}) == expected
    assert gallery_from_data({"gallery": [[1, 2], [3, 4]]}) == expected


@pytest.mark.parametrize(
    "data",
    [{}, {"top": [1]}, {"gallery": 5}, {"gallery": [[1], [2], [3]]}, {"gallery": [[1], ["a"]]}],
    ids=["empty", "top-only", "scalar", "three-rows", "string-value"],
)
def test_gallery_from_data_rejects_bad_shapes(data: dict) -> None:
    with pytest.raises(InvalidRequest):
        gallery_from_data(data)


def test_load_gallery(tmp_path: Path) -> None:
    path = tmp_path / "gallery.json"
    path.write_text(json.dumps({"top": [1, 9, 1], "bottom": [1, 1, 9]}))
    assert load_gallery(path).columns == 3


def test_load_gallery_errors(tmp_path: Path) -> None:
    with pytest.raises(InvalidRequest):
        load_gallery(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(InvalidRequest):
        load_gallery(broken)

    listed = tmp_path / "list.json"
    listed.write_text("[[1], [2]]")
    with pytest.raises(InvalidRequest):
        load_gallery(listed)


# -- validation ---------------------------------------------------------------


def test_validate_rooms_to_close() -> None:
    gallery = Gallery.from_rows([[1, 2, 3], [4, 5, 6]])
    assert validate_rooms_to_close(gallery, 1) == 1
    assert validate_rooms_to_close(gallery, 3) == 3
    for rooms in (0, -1, 4):
        with pytest.raises(InvalidRequest):
            validate_rooms_to_close(gallery, rooms)


# -- generator ----------------------------------------------------------------


def test_randomize_is_seeded_and_in_range() -> None:
    a = GalleryGenerator.randomize(12, random.Random(3))
    b = GalleryGenerator.randomize(12, random.Random(3))
    assert a == b
    assert a.columns == 12
    for value in (*a.top, *a.bottom):
        assert config.ROOM_VALUE_MIN <= value <= config.ROOM_VALUE_MAX


def test_rerandomize_keeps_shape() -> None:
    blank = Gallery.filled(5, 0)
    fresh = GalleryGenerator.rerandomize(blank, random.Random(1))
    assert fresh.columns == 5
    assert fresh == GalleryGenerator.randomize(5, random.Random(1))
