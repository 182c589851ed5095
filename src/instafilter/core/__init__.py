"""Qt independent filtering logic.

The GUI layer only talks to :class:`FilterSession`; everything below it works
on Pillow images and can be exercised without a display.
"""

from __future__ import annotations

from .filter_engine import FILTER_ROLES, FilterEngine, PillowFilterEngine
from .filter_kinds import DEFAULT_FILTER, FilterKind, ParameterRole
from .parameters import ROLE_SCALES, derive_parameters
from .session import FilterSession, SessionResult, SessionStatus
from .usage import ReviewPolicy, UsageCounter, should_request_review

__all__ = [
    "DEFAULT_FILTER",
    "FILTER_ROLES",
    "FilterEngine",
    "FilterKind",
    "FilterSession",
    "ParameterRole",
    "PillowFilterEngine",
    "ROLE_SCALES",
    "ReviewPolicy",
    "SessionResult",
    "SessionStatus",
    "UsageCounter",
    "derive_parameters",
    "should_request_review",
]
