"""Wall-clock arithmetic shared by every detector.

All comparisons go through ``overlaps``: intervals are half-open, so a block
ending at 10:00 and one starting at 10:00 do not collide.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from app.schemas.planner import MeetingBlock

logger = logging.getLogger(__name__)


def to_minutes(time: str) -> int:
    """Convert "HH:MM" to minutes since midnight. No format validation."""
    hours, minutes = time.split(":")
    return int(hours) * 60 + int(minutes)


def overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    # Zero or negative length intervals occupy no time.
    if a_start >= a_end or b_start >= b_end:
        return False
    return a_start < b_end and b_start < a_end


def gap(first_end: int, second_start: int) -> int:
    return second_start - first_end


def block_minutes(block: MeetingBlock) -> tuple[int, int] | None:
    """Return ``(start, end)`` for a block that can take part in overlap checks.

    Blocks whose times do not parse, or whose end is not after their start,
    yield ``None`` and are left out of every conflict computation.
    """
    try:
        start = to_minutes(block.startTime)
        end = to_minutes(block.endTime)
    except ValueError:
        logger.debug("Skipping meeting block with unreadable times %r-%r", block.startTime, block.endTime)
        return None
    if end <= start:
        logger.debug("Skipping meeting block with non-positive duration %s-%s", block.startTime, block.endTime)
        return None
    return start, end


def format_day_list(blocks: Iterable[MeetingBlock]) -> str:
    days: list[str] = []
    for block in blocks:
        if block.day.value not in days:
            days.append(block.day.value)
    return "/".join(days)


def format_block(block: MeetingBlock) -> str:
    return f"{block.day.value} {block.startTime}-{block.endTime}"
