from backend.models.errors import (
    ContractViolation,
    GalleryError,
    InvalidRequest,
    SolveTimeout,
)
from backend.models.gallery import Gallery, Side
from backend.models.solution import Plan, Solution

__all__ = [
    "ContractViolation",
    "Gallery",
    "GalleryError",
    "InvalidRequest",
    "Plan",
    "Side",
    "Solution",
    "SolveTimeout",
]
