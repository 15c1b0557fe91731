"""
Roadmap Engine.

This module discovers the prerequisite tree of a target course in the
catalog and narrows it to the set of courses a student still has to take.
"""

import logging
from typing import Hashable, Iterable

from ..exceptions import CourseNotFoundError
from ..models import Roadmap
from ..data import CatalogLoader

logger = logging.getLogger(__name__)


class RoadmapEngine:
    """
    Builds prerequisite trees from the catalog.

    DEPTH:
    ------
    A course's depth is its LONGEST distance below the target. MATH 20A sits
    at depth 2 under MATH 20C even if some other chain reaches it in one
    step, because the longer chain decides how early it must be taken.

    CYCLES:
    -------
    Catalog data can contain circular prerequisites. Traversal stops
    deepening once a depth exceeds the catalog size, which can only happen
    on a cycle; the planner then reports the cycle itself.
    """

    def __init__(self, data_loader: CatalogLoader):
        self.loader = data_loader

    def _depths(self, target_id: Hashable, skip: set) -> dict:
        """Longest-path depth of every course reachable from the target."""
        prereq_index = self.loader.prereq_index
        limit = len(self.loader.courses)

        depths = {target_id: 0}
        frontier = [target_id]
        while frontier:
            next_frontier = []
            for cid in frontier:
                for prereq in prereq_index.get(cid, ()):
                    if prereq in skip:
                        continue
                    depth = depths[cid] + 1
                    if depth > limit:
                        continue
                    if depths.get(prereq, -1) < depth:
                        depths[prereq] = depth
                        next_frontier.append(prereq)
            frontier = next_frontier
        return depths

    def _require(self, target_id: Hashable):
        if target_id not in self.loader.courses:
            raise CourseNotFoundError(f"Course not found: {target_id!r}")
        return self.loader.courses[target_id]

    def build(self, target_id: Hashable) -> Roadmap:
        """
        Full prerequisite tree of a course, ignoring what the student has done.

        Returns:
            Roadmap with prerequisites ordered shallowest first, then by
            catalog order
        """
        target = self._require(target_id)
        depths = self._depths(target_id, skip=set())
        position = self.loader.position

        prereq_ids = sorted(
            (cid for cid in depths if cid != target_id),
            key=lambda cid: (depths[cid], position[cid]),
        )
        edges = [
            e for e in self.loader.edges
            if e.course_id in depths and e.prereq_course_id in depths
        ]
        return Roadmap(
            target=target,
            prerequisites=[self.loader.courses[cid] for cid in prereq_ids],
            edges=edges,
            depths=depths,
        )

    def schedule_set(self, target_id: Hashable, completed_ids: Iterable[Hashable] = ()) -> tuple:
        """
        Courses and edges the planner still has to place for this target.

        Completed courses are dropped, and so is anything only needed as a
        prerequisite of a completed course. If the target itself is done,
        nothing is left to schedule.

        Returns:
            (courses, edges) with the deepest courses first
        """
        self._require(target_id)
        completed = set(completed_ids)
        if target_id in completed:
            return [], []

        depths = self._depths(target_id, skip=completed)
        position = self.loader.position
        ordered = sorted(depths, key=lambda cid: (-depths[cid], position[cid]))

        courses = [self.loader.courses[cid] for cid in ordered]
        edges = [
            e for e in self.loader.edges
            if e.course_id in depths and e.prereq_course_id in depths
        ]
        logger.debug(
            "Schedule set for %s: %d course(s), %d already completed",
            self.loader.courses[target_id].code,
            len(courses),
            len(completed),
        )
        return courses, edges
