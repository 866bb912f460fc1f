"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - PostId, CategoryId wrap ints - never pass a bare int across a module seam
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)
CategoryId = NewType("CategoryId", int)
ThumbnailKey = NewType("ThumbnailKey", str)   # opaque storage path, never a URL


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Locales with a message catalog in language_strings."""
    EN = "en"
    JA = "ja"


class FormStatus(str, Enum):
    """Form submit lifecycle.

    idle -> validating -> (invalid | submitting) -> (navigated | failed).
    INVALID and FAILED are idle states carrying errors or an alert.
    """
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    SUBMITTING = "submitting"
    NAVIGATED = "navigated"
    FAILED = "failed"


class ViewStatus(str, Enum):
    """Render states for list and detail pages."""
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    READY = "ready"
