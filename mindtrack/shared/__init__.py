"""MindTrack Shared Utilities"""

from .hashing import (
    canonicalize,
    canonicalize_and_hash,
    extract_hash_digest,
    hash_to_unit_interval,
)
from .disclaimer import (
    choose_support_note,
    GENERAL_WELLNESS_NOTE,
    PROFESSIONAL_SUPPORT_NOTE,
)

__all__ = [
    "canonicalize",
    "canonicalize_and_hash",
    "extract_hash_digest",
    "hash_to_unit_interval",
    "choose_support_note",
    "GENERAL_WELLNESS_NOTE",
    "PROFESSIONAL_SUPPORT_NOTE",
]
