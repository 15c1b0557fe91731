"""
Major data models.

A Major groups catalog courses into requirement groups ("Lower Division",
"Upper Division Core", ...). The planner never sees majors; they are a way
for students to find a target course.
"""

from dataclasses import dataclass, field
from typing import Hashable, Optional

from .course import _pick


@dataclass(frozen=True)
class MajorRequirement:
    """One course a major lists, and the group it is listed under."""
    course_id: Hashable
    group_name: Optional[str] = None
    required: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "MajorRequirement":
        return cls(
            course_id=_pick(data, "courseId", "course_id"),
            group_name=_pick(data, "groupName", "group_name"),
            required=bool(_pick(data, "required", default=True)),
        )

    def to_dict(self) -> dict:
        return {"courseId": self.course_id, "groupName": self.group_name, "required": self.required}


@dataclass(frozen=True)
class Major:
    """
    A degree program.

    Attributes:
        id: Unique identifier
        name: Display name (e.g., "Mathematics")
        code: Institution major code (e.g., "MA30")
        requirements: MajorRequirement rows, empty when the source only
                      reports a count (the API's majors listing)
        requirement_count: Number of requirement rows
    """
    id: Hashable
    name: str
    code: Optional[str] = None
    requirements: tuple = field(default_factory=tuple)
    requirement_count: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "Major":
        requirements = tuple(
            MajorRequirement.from_dict(r) for r in data.get("requirements") or []
        )
        # The API listing only carries {"_count": {"requirements": n}}
        count = (data.get("_count") or {}).get("requirements")
        if count is None:
            count = _pick(data, "requirementCount", default=len(requirements))
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            code=_pick(data, "ucsdCode", "code"),
            requirements=requirements,
            requirement_count=count,
        )

    @property
    def groups(self) -> list:
        """Requirement group names in first-seen order."""
        return list(dict.fromkeys(r.group_name for r in self.requirements if r.group_name))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "ucsdCode": self.code,
            "requirements": [r.to_dict() for r in self.requirements],
            "requirementCount": self.requirement_count,
        }
