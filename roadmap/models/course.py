"""
Course data models.

Contains the catalog Course, the PrereqEdge linking two courses, and the
TranscriptCourse/CourseStatus pair that represent a student's record.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Optional

from ..config import DEFAULT_DIFFICULTY, DEFAULT_WORKLOAD, SCORE_MAX, SCORE_MIN


def _pick(data: dict, *keys, default=None):
    """Return the first key present in data (API uses camelCase, files may not)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass(frozen=True)
class Course:
    """
    A catalog course, the unit the planner schedules.

    Courses are immutable snapshots: the planner never modifies them, it only
    decides which quarter each one lands in.

    Attributes:
        id: Unique identifier (database integer or any hashable key)
        dept: Department code (e.g., "MATH")
        number: Course number within the department (e.g., "20A")
        title: Human-readable course title
        units_min: Minimum units the course can be taken for
        units_max: Maximum units; the planner budgets with this value
        difficulty: Difficulty rating on the 1-10 scale
        workload: Weekly workload rating on the 1-10 scale
        typical_terms: Term codes the course is usually offered in
                       ("FA", "WI", "SP"). Empty means every term.
        description: Optional catalog description
    """
    id: Hashable
    dept: str
    number: str
    title: str
    units_min: int
    units_max: int
    difficulty: float = DEFAULT_DIFFICULTY
    workload: float = DEFAULT_WORKLOAD
    typical_terms: frozenset = field(default_factory=frozenset)
    description: Optional[str] = None

    def __post_init__(self):
        if self.units_max < self.units_min:
            raise ValueError(
                f"{self.code}: units_max ({self.units_max}) is below units_min ({self.units_min})"
            )
        for name in ("difficulty", "workload"):
            value = getattr(self, name)
            if not SCORE_MIN <= value <= SCORE_MAX:
                raise ValueError(f"{self.code}: {name} {value} outside {SCORE_MIN}-{SCORE_MAX}")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(
            self, "typical_terms", frozenset(t.upper() for t in self.typical_terms)
        )

    @property
    def code(self) -> str:
        """Course code as printed in catalogs and transcripts (e.g., "MATH 20A")."""
        return f"{self.dept} {self.number}"

    def is_offered(self, code: str) -> bool:
        """True if the course runs in the term with this offering code."""
        return not self.typical_terms or code in self.typical_terms

    @classmethod
    def from_dict(cls, data: dict) -> "Course":
        """Build a Course from a catalog or API record."""
        units_max = _pick(data, "unitsMax", "units_max", "units", default=0)
        return cls(
            id=data["id"],
            dept=data.get("dept", ""),
            number=str(data.get("number", "")),
            title=data.get("title", ""),
            units_min=_pick(data, "unitsMin", "units_min", default=units_max),
            units_max=units_max,
            difficulty=_pick(data, "difficulty", default=DEFAULT_DIFFICULTY),
            workload=_pick(data, "workload", default=DEFAULT_WORKLOAD),
            typical_terms=frozenset(_pick(data, "typicalTerms", "typical_terms", default=[])),
            description=data.get("description"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "dept": self.dept,
            "number": self.number,
            "title": self.title,
            "unitsMin": self.units_min,
            "unitsMax": self.units_max,
            "difficulty": self.difficulty,
            "workload": self.workload,
            "typicalTerms": sorted(self.typical_terms),
        }


@dataclass(frozen=True)
class PrereqEdge:
    """
    A prerequisite relation: prereq_course_id must be taken in a quarter
    strictly before course_id.
    """
    course_id: Hashable
    prereq_course_id: Hashable

    @classmethod
    def from_dict(cls, data: dict) -> "PrereqEdge":
        return cls(
            course_id=_pick(data, "courseId", "course_id"),
            prereq_course_id=_pick(data, "prereqCourseId", "prereq_course_id"),
        )

    def to_dict(self) -> dict:
        return {"courseId": self.course_id, "prereqCourseId": self.prereq_course_id}


class CourseStatus(Enum):
    """
    Possible states for a course on a student's record.

    COMPLETED: Student passed the course with a qualifying grade
    IN_PROGRESS: Student is currently enrolled (no grade yet)
    FAILED: Student did not pass (F, NP, W, etc.)
    NOT_TAKEN: Course has never been attempted
    """
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    FAILED = "failed"
    NOT_TAKEN = "not_taken"


@dataclass
class TranscriptCourse:
    """
    A single row from the student's transcript.

    course_id is filled in when the transcript code matches a catalog course,
    otherwise it stays None and the row is reported as unmatched.
    """
    code: str
    title: str
    units: float
    grade: Optional[str]
    term: str
    status: CourseStatus
    course_id: Optional[Hashable] = None
