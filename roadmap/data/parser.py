"""
Transcript parsing.

This module turns a student's transcript into the set of catalog course IDs
the planner should treat as already taken.
"""

import re

from ..config import PASSING_GRADES, FAILING_GRADES
from ..models import CourseStatus, TranscriptCourse
from .loader import CatalogLoader, normalize_code


class TranscriptParser:
    """
    Parses student transcripts against the catalog.

    TWO INPUT SHAPES:
    - parse(): a structured transcript (JSON rows with code, grade, term)
    - match_text(): raw text already extracted from a transcript PDF,
      scanned for "DEPT NUMBER" patterns

    DUPLICATE HANDLING:
    Students sometimes retake courses. We keep the "best" outcome:
    - If completed, keep completed (ignore later failed attempts)
    - If in-progress, keep in-progress over failed
    - This prevents a failed retake from hiding a passing grade
    """

    def __init__(self, data_loader: CatalogLoader):
        self.loader = data_loader

    def parse(self, transcript_data: dict) -> dict:
        """
        Parse transcript and return structured student state.

        Args:
            transcript_data: Parsed transcript JSON
                {"student": {...}, "courses": [{"code", "title", "grade", ...}]}

        Returns:
            {
                "student": {name, institution, ...},
                "completed": [TranscriptCourse, ...],
                "in_progress": [TranscriptCourse, ...],
                "failed": [TranscriptCourse, ...],
                "unmatched": [TranscriptCourse, ...],   # not in the catalog
                "completed_ids": {course_id, ...},      # what the planner needs
            }
        """
        student_info = transcript_data.get("student", {})
        best = {}

        for row in transcript_data.get("courses", []):
            course = self._parse_course(row)
            key = normalize_code(course.code)
            existing = best.get(key)
            if existing is not None and _rank(existing.status) >= _rank(course.status):
                continue
            best[key] = course

        rows = list(best.values())
        completed = [c for c in rows if c.status == CourseStatus.COMPLETED]

        return {
            "student": student_info,
            "completed": completed,
            "in_progress": [c for c in rows if c.status == CourseStatus.IN_PROGRESS],
            "failed": [c for c in rows if c.status == CourseStatus.FAILED],
            "unmatched": [c for c in rows if c.course_id is None],
            "completed_ids": {c.course_id for c in completed if c.course_id is not None},
        }

    def _parse_course(self, course_data: dict) -> TranscriptCourse:
        """
        Parse a single transcript row.

        STATUS DETERMINATION LOGIC:
        1. Explicit "in_progress" status OR no grade = currently enrolled
        2. Grade in PASSING_GRADES = completed successfully
        3. Grade in FAILING_GRADES = not completed
        4. Unknown grade = treat as failed (don't assume passing)
        """
        code = course_data.get("code", "")
        grade = course_data.get("grade")
        if isinstance(grade, str):
            grade = grade.strip().upper() or None

        if course_data.get("status") == "in_progress" or grade is None:
            status = CourseStatus.IN_PROGRESS
        elif grade in PASSING_GRADES:
            status = CourseStatus.COMPLETED
        elif grade in FAILING_GRADES:
            status = CourseStatus.FAILED
        else:
            status = CourseStatus.FAILED

        catalog_course = self.loader.find_by_code(code)
        return TranscriptCourse(
            code=code,
            title=course_data.get("title", ""),
            units=course_data.get("units", 0.0) or 0.0,
            grade=grade,
            term=course_data.get("term", ""),
            status=status,
            course_id=catalog_course.id if catalog_course else None,
        )

    def match_text(self, text: str) -> list:
        """
        Find catalog courses mentioned in raw transcript text.

        Transcripts sometimes double-space, so 1-4 whitespace characters are
        allowed between department and number. Matching is case-insensitive
        and bounded by word breaks ("MATH 20" does not match "MATH 20A").

        Returns:
            Matched course ids in catalog order
        """
        matched = []
        for course in self.loader.courses.values():
            pattern = re.compile(
                rf"\b{re.escape(course.dept)}\s{{1,4}}{re.escape(course.number)}\b",
                re.IGNORECASE,
            )
            if pattern.search(text):
                matched.append(course.id)
        return matched


def _rank(status: CourseStatus) -> int:
    """completed > in_progress > failed."""
    return {
        CourseStatus.COMPLETED: 3,
        CourseStatus.IN_PROGRESS: 2,
        CourseStatus.FAILED: 1,
    }.get(status, 0)
