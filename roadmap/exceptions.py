"""
Exceptions raised by the roadmap package.

Planning itself never raises: problems found while building a schedule are
reported in the PlanExplanation. These exceptions cover contract violations
in the data layer and the internal cycle signal of the critical-path analyzer.
"""


class RoadmapError(Exception):
    """Base class for all roadmap errors."""


class CycleDetectedError(RoadmapError):
    """The prerequisite graph contains a cycle."""

    def __init__(self, unresolved):
        self.unresolved = list(unresolved)
        super().__init__(
            f"Circular dependency among {len(self.unresolved)} course(s): "
            f"{', '.join(str(c) for c in self.unresolved)}"
        )


class CourseNotFoundError(RoadmapError, KeyError):
    """A requested course does not exist in the catalog."""

    def __str__(self):
        return str(self.args[0]) if self.args else "Course not found"


class RoadmapAPIError(RoadmapError):
    """The roadmap API answered with an error status or an unreadable body."""

    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)
