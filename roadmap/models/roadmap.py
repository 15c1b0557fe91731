"""
Roadmap data model.

A Roadmap is the prerequisite tree of one target course: every course that
must be taken before it, with the depth at which it sits below the target.
"""

from dataclasses import dataclass, field

from .course import Course


@dataclass
class Roadmap:
    """
    Prerequisite closure of a target course.

    Attributes:
        target: The course the student wants to reach (depth 0)
        prerequisites: All transitive prerequisites, shallowest first
        edges: PrereqEdge list restricted to the closure
        depths: {course_id: depth}, depth = longest distance to the target
    """
    target: Course
    prerequisites: list
    edges: list
    depths: dict = field(default_factory=dict)

    @property
    def courses(self) -> list:
        """Target followed by its prerequisites."""
        return [self.target] + list(self.prerequisites)

    def depth_of(self, course_id) -> int:
        return self.depths.get(course_id, 0)

    def to_dict(self) -> dict:
        def node(course):
            data = course.to_dict()
            data["depth"] = self.depth_of(course.id)
            return data

        return {
            "targetCourse": node(self.target),
            "prerequisites": [node(c) for c in self.prerequisites],
            "edges": [e.to_dict() for e in self.edges],
        }
