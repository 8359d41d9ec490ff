"""
Meeting Validation
Predicates over a possibly-absent meeting.

Every predicate raises MeetingNotFoundError when given None. Unset flags and
strings count as false / empty.
"""

from typing import Callable, List, Optional, Tuple

from app.core.exceptions import MeetingHourNegativeError, MeetingNotFoundError
from app.models.meeting import Meeting


def _require(meeting: Optional[Meeting]) -> Meeting:
    if meeting is None:
        raise MeetingNotFoundError()
    return meeting


def _is_hybrid(meeting: Meeting) -> bool:
    return bool(meeting.is_onsite) and bool(meeting.is_online)


def is_title_empty(meeting: Optional[Meeting]) -> bool:
    """True if the meeting has no title."""
    return not _require(meeting).title


def is_hour_empty(meeting: Optional[Meeting]) -> bool:
    """
    True if the meeting's duration is zero hours.

    Raises:
        MeetingNotFoundError: If meeting is None
        MeetingHourNegativeError: If the duration is negative
    """
    hour = _require(meeting).hour or 0
    if hour < 0:
        raise MeetingHourNegativeError(hour)
    return hour == 0


def is_onsite_but_no_place_specified(meeting: Optional[Meeting]) -> bool:
    meeting = _require(meeting)
    return bool(meeting.is_onsite) and not meeting.is_online and not meeting.place


def is_online_but_no_url_specified(meeting: Optional[Meeting]) -> bool:
    meeting = _require(meeting)
    return not meeting.is_onsite and bool(meeting.is_online) and not meeting.url


def is_hybrid_but_neither_place_or_url_specified(meeting: Optional[Meeting]) -> bool:
    meeting = _require(meeting)
    return _is_hybrid(meeting) and not meeting.place and not meeting.url


def is_hybrid_but_no_place_specified(meeting: Optional[Meeting]) -> bool:
    meeting = _require(meeting)
    return _is_hybrid(meeting) and not meeting.place


def is_hybrid_but_no_url_specified(meeting: Optional[Meeting]) -> bool:
    meeting = _require(meeting)
    return _is_hybrid(meeting) and not meeting.url


# Problem code -> predicate, in reporting order
MEETING_CHECKS: List[Tuple[str, Callable[[Optional[Meeting]], bool]]] = [
    ("title_empty", is_title_empty),
    ("hour_empty", is_hour_empty),
    ("onsite_no_place", is_onsite_but_no_place_specified),
    ("online_no_url", is_online_but_no_url_specified),
    ("hybrid_no_place_or_url", is_hybrid_but_neither_place_or_url_specified),
    ("hybrid_no_place", is_hybrid_but_no_place_specified),
    ("hybrid_no_url", is_hybrid_but_no_url_specified),
]


def find_meeting_problems(meeting: Optional[Meeting]) -> List[str]:
    """
    Run every check and return the codes of those that fail.

    A negative hour propagates MeetingHourNegativeError rather than being
    reported as a code.
    """
    _require(meeting)
    return [code for code, check in MEETING_CHECKS if check(meeting)]
