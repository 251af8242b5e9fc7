from backend.engine.galleryinput.parser import (
    gallery_from_data,
    load_gallery,
    parse_gallery,
    parse_row,
    validate_rooms_to_close,
)

__all__ = [
    "gallery_from_data",
    "load_gallery",
    "parse_gallery",
    "parse_row",
    "validate_rooms_to_close",
]
