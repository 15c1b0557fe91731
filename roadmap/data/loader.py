"""
Catalog loading and caching.

This module handles loading the course catalog (courses plus prerequisite
edges) with caching to prevent repeated file I/O while planning.
"""

import json
import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Optional

from ..config import DATA_DIR, DEFAULT_CATALOG
from ..models import Course, Major, PrereqEdge

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 50


class CatalogLoader:
    """
    Loads and caches a course catalog.

    WHY LAZY LOADING: Properties only parse the file when first accessed,
    and derived indexes are built once and reused across planning runs.

    CATALOG FORMAT:
    {
        "courses": [
            {"id": 1, "dept": "MATH", "number": "20A", "title": "...",
             "unitsMin": 4, "unitsMax": 4, "difficulty": 5, "workload": 6,
             "typicalTerms": ["FA", "WI", "SP"]},
            ...
        ],
        "edges": [
            {"courseId": 2, "prereqCourseId": 1},    # MATH 20B needs MATH 20A
            ...
        ],
        "majors": [                                 # optional
            {"id": 1, "name": "Mathematics", "ucsdCode": "MA30",
             "requirements": [{"courseId": 1, "groupName": "Lower Division",
                               "required": true}, ...]},
        ]
    }

    Usage:
        loader = CatalogLoader()
        course = loader.find_by_code("MATH 20C")
        matches = loader.search("math 20")
    """

    def __init__(self, catalog_path: Optional[Path] = None, data: Optional[dict] = None):
        # Private cache variables - None means "not loaded yet"
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG
        self._raw = data
        self._courses = None
        self._edges = None
        self._prereq_index = None
        self._position = None
        self._code_index = None
        self._majors = None

    @classmethod
    def from_data(cls, data: dict) -> "CatalogLoader":
        """Wrap an in-memory catalog (e.g., fetched from the API)."""
        return cls(data=data)

    @property
    def raw(self) -> dict:
        if self._raw is None:
            if not self.catalog_path.exists():
                raise FileNotFoundError(f"Catalog file not found: {self.catalog_path}")
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                self._raw = json.load(f)
            logger.debug("Loaded catalog %s", self.catalog_path)
        return self._raw

    @property
    def courses(self) -> dict:
        """{course_id: Course} in catalog order."""
        if self._courses is None:
            self._courses = {}
            for record in self.raw.get("courses", []):
                course = Course.from_dict(record)
                if course.id in self._courses:
                    logger.warning("Duplicate course id %r in catalog; keeping the first", course.id)
                    continue
                self._courses[course.id] = course
        return self._courses

    @property
    def edges(self) -> list:
        """Prerequisite edges whose courses both exist in the catalog."""
        if self._edges is None:
            self._edges = []
            for record in self.raw.get("edges", []):
                edge = PrereqEdge.from_dict(record)
                if edge.course_id not in self.courses or edge.prereq_course_id not in self.courses:
                    logger.warning("Dropping edge with unknown course: %r", record)
                    continue
                self._edges.append(edge)
        return self._edges

    @property
    def prereq_index(self) -> dict:
        """{course_id: [prerequisite ids]} for quick tree walks."""
        if self._prereq_index is None:
            index = {}
            for edge in self.edges:
                index.setdefault(edge.course_id, []).append(edge.prereq_course_id)
            self._prereq_index = index
        return self._prereq_index

    @property
    def position(self) -> dict:
        """{course_id: index in catalog order}, used for stable ordering."""
        if self._position is None:
            self._position = {cid: i for i, cid in enumerate(self.courses)}
        return self._position

    @property
    def code_index(self) -> dict:
        """{"MATH 20A": Course} keyed by normalized course code."""
        if self._code_index is None:
            self._code_index = {normalize_code(c.code): c for c in self.courses.values()}
        return self._code_index

    @property
    def majors(self) -> dict:
        """{major_id: Major} in catalog order, requirements limited to known courses."""
        if self._majors is None:
            self._majors = {}
            for record in self.raw.get("majors", []):
                major = Major.from_dict(record)
                unknown = [r for r in major.requirements if r.course_id not in self.courses]
                if unknown:
                    logger.warning(
                        "Dropping %d requirement(s) of %s with unknown courses",
                        len(unknown),
                        major.name,
                    )
                    kept = tuple(r for r in major.requirements if r.course_id in self.courses)
                    major = replace(major, requirements=kept, requirement_count=len(kept))
                self._majors[major.id] = major
        return self._majors

    def list_majors(self) -> list:
        """All majors, ordered by name."""
        return sorted(self.majors.values(), key=lambda m: m.name)

    def get_major(self, major_id) -> Optional[Major]:
        return self.majors.get(major_id)

    def courses_for_major(self, major_id, group: Optional[str] = None) -> list:
        """
        Courses a major lists, ordered by department then number.

        Pass group (e.g., "Upper Division Core") to keep one requirement
        group only. An unknown major has no courses.
        """
        major = self.majors.get(major_id)
        if major is None:
            return []
        courses = [
            self.courses[r.course_id] for r in major.requirements
            if group is None or r.group_name == group
        ]
        courses.sort(key=lambda c: (c.dept, c.number))
        return courses

    def get(self, course_id) -> Optional[Course]:
        return self.courses.get(course_id)

    def find_course(self, dept: str, number: str) -> Optional[Course]:
        return self.code_index.get(normalize_code(f"{dept} {number}"))

    def find_by_code(self, code: str) -> Optional[Course]:
        """Case- and spacing-insensitive lookup ("math  20a" finds MATH 20A)."""
        return self.code_index.get(normalize_code(code))

    def search(self, query: str, limit: int = SEARCH_LIMIT) -> list:
        """
        Search by department and number, or by title.

        The first word is matched against the department and the second
        (if any) against the course number; the whole query is also matched
        against titles. Results are sorted by department, then number.
        """
        query = query.strip()
        if not query:
            return []

        terms = query.split()
        dept_pattern = terms[0].upper()
        number_pattern = terms[1].upper() if len(terms) > 1 else ""
        title_pattern = query.lower()

        matches = [
            c for c in self.courses.values()
            if (dept_pattern in c.dept.upper() and number_pattern in c.number.upper())
            or title_pattern in c.title.lower()
        ]
        matches.sort(key=lambda c: (c.dept, c.number))
        return matches[:limit]

    @staticmethod
    def list_catalogs(directory: Optional[Path] = None) -> list:
        """List catalog files available in the data directory."""
        directory = Path(directory) if directory else DATA_DIR
        return sorted(f.name for f in directory.glob("*catalog*.json"))


def normalize_code(code: str) -> str:
    """Upper-case a course code and collapse runs of whitespace."""
    return re.sub(r"\s+", " ", code.strip()).upper()
