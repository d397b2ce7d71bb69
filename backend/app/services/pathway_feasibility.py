"""Pairwise feasibility of pathway course bundles.

A pathway is infeasible for a pair of required courses when no section of
one can be combined with any section of the other without a time clash.
Only pairs are examined; a set of three or more courses can be pairwise
feasible and still have no clash-free combination overall.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from app.schemas.conflict import PathwayIssue
from app.schemas.planner import Pathway, Section
from app.services.schedule_index import ScheduledBlock, section_entries
from app.services.time_intervals import format_day_list, overlaps

logger = logging.getLogger(__name__)


def _entries_conflict(a: Sequence[ScheduledBlock], b: Sequence[ScheduledBlock]) -> bool:
    return any(
        entry_a.day == entry_b.day and overlaps(entry_a.start, entry_a.end, entry_b.start, entry_b.end)
        for entry_a in a
        for entry_b in b
    )


def sections_conflict(a: Section, b: Section) -> bool:
    """True when any block of ``a`` overlaps any block of ``b`` on the same day.

    A section with no meeting blocks (asynchronous online) never conflicts.
    """
    return _entries_conflict(section_entries(a), section_entries(b))


def _distinct(codes: Iterable[str]) -> list[str]:
    seen: list[str] = []
    for code in codes:
        if code not in seen:
            seen.append(code)
    return seen


def check_pathways(sections: Iterable[Section], pathways: Iterable[Pathway]) -> list[PathwayIssue]:
    # Each section's blocks are parsed once and shared by every pathway.
    offerings: dict[str, list[tuple[Section, list[ScheduledBlock]]]] = defaultdict(list)
    for section in sections:
        offerings[section.courseCode].append((section, section_entries(section)))

    issues: list[PathwayIssue] = []
    for pathway in pathways:
        # One issue per listing: a code required twice and missing is reported twice.
        for course_code in pathway.requiredCourseCodes:
            if offerings.get(course_code):
                continue
            issues.append(PathwayIssue(
                pathwayId=pathway.id,
                pathwayName=pathway.name,
                kind="unavailable",
                courseCodes=[course_code],
                message=f"{course_code}: no sections offered",
            ))

        # Repeated codes would otherwise be compared with themselves.
        required = _distinct(pathway.requiredCourseCodes)
        for i in range(len(required)):
            course_a = required[i]
            offered_a = offerings.get(course_a, [])
            if not offered_a:
                continue
            for j in range(i + 1, len(required)):
                course_b = required[j]
                offered_b = offerings.get(course_b, [])
                if not offered_b:
                    continue
                all_pairs_conflict = all(
                    _entries_conflict(entries_a, entries_b)
                    for _, entries_a in offered_a
                    for _, entries_b in offered_b
                )
                if all_pairs_conflict:
                    logger.debug(
                        "Pathway %s: %s [%s] never fits with %s [%s]",
                        pathway.id,
                        course_a,
                        ", ".join(format_day_list(s.meetingBlocks) or "async" for s, _ in offered_a),
                        course_b,
                        ", ".join(format_day_list(s.meetingBlocks) or "async" for s, _ in offered_b),
                    )
                    issues.append(PathwayIssue(
                        pathwayId=pathway.id,
                        pathwayName=pathway.name,
                        kind="exhaustive_conflict",
                        courseCodes=[course_a, course_b],
                        message=f"{course_a} conflicts with {course_b} for all available sections",
                    ))

    return issues
