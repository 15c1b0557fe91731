"""
Prerequisite Graph Builder.

Turns the flat course list and edge list handed to the planner into
adjacency lookups in both directions.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Hashable, Iterable, Mapping

from ..models import Course, PrereqEdge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrereqGraph:
    """
    Immutable prerequisite DAG (acyclicity is checked later, not assumed).

    Every input course has an entry in both mappings, so isolated courses
    are represented with empty tuples. Neighbour tuples keep the input
    order of the course list, which keeps every later pass deterministic.

    Attributes:
        course_ids: Course ids in input order
        courses: {course_id: Course}
        prereqs_of: {course_id: (ids that must come first)}
        dependents_of: {course_id: (ids that require this course)}
    """
    course_ids: tuple
    courses: Mapping
    prereqs_of: Mapping
    dependents_of: Mapping

    def __len__(self):
        return len(self.course_ids)

    def __contains__(self, course_id: Hashable) -> bool:
        return course_id in self.courses

    def course(self, course_id: Hashable) -> Course:
        return self.courses[course_id]

    def name_of(self, course_id: Hashable) -> str:
        """Display name for explanations ("MATH 20A"), falls back to the raw id."""
        course = self.courses.get(course_id)
        return course.code if course else str(course_id)


def build_graph(courses: Iterable[Course], edges: Iterable[PrereqEdge]) -> PrereqGraph:
    """
    Build prerequisite and dependent adjacency for the given courses.

    Edges that reference a course outside the list are the caller's
    mistake; they are skipped with a warning rather than failing the run.
    """
    ordered = {}
    for course in courses:
        if course.id in ordered:
            logger.warning("Duplicate course id %r (%s) ignored", course.id, course.code)
            continue
        ordered[course.id] = course

    position = {course_id: i for i, course_id in enumerate(ordered)}
    prereqs = {course_id: set() for course_id in ordered}
    dependents = {course_id: set() for course_id in ordered}

    for edge in edges:
        if edge.course_id not in ordered or edge.prereq_course_id not in ordered:
            logger.warning(
                "Skipping edge %r -> %r: course not in schedule set",
                edge.prereq_course_id,
                edge.course_id,
            )
            continue
        prereqs[edge.course_id].add(edge.prereq_course_id)
        dependents[edge.prereq_course_id].add(edge.course_id)

    def in_input_order(ids):
        return tuple(sorted(ids, key=position.__getitem__))

    graph = PrereqGraph(
        course_ids=tuple(ordered),
        courses=MappingProxyType(ordered),
        prereqs_of=MappingProxyType({k: in_input_order(v) for k, v in prereqs.items()}),
        dependents_of=MappingProxyType({k: in_input_order(v) for k, v in dependents.items()}),
    )
    logger.debug(
        "Built prerequisite graph: %d courses, %d edges",
        len(graph),
        sum(len(p) for p in graph.prereqs_of.values()),
    )
    return graph
