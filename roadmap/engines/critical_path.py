"""
Critical-Path Analyzer.

Orders courses topologically and derives, for every course, the window of
quarters it may occupy and how much of the plan hangs on it.
"""

import logging
from dataclasses import dataclass
from typing import Hashable, Optional

from ..exceptions import CycleDetectedError
from .graph import PrereqGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CriticalPath:
    """
    Result of the critical-path analysis.

    Attributes:
        order: Course ids in topological order
        earliest: {course_id: first quarter offset it can occupy}
        latest: {course_id: last offset that keeps the target on time};
                courses that do not lead to the target are absent (no bound)
        downstream: {course_id: weighted count of courses depending on it}
        target_offset: Offset the target course is pinned to
    """
    order: tuple
    earliest: dict
    latest: dict
    downstream: dict
    target_offset: int

    def latest_of(self, course_id: Hashable) -> Optional[int]:
        return self.latest.get(course_id)


def topological_order(graph: PrereqGraph) -> tuple:
    """
    Kahn's algorithm, processed level by level.

    earliest is the longest path from any root: a course is only ready once
    its SLOWEST prerequisite chain has cleared, so it takes the max, not the
    min, over its prerequisites.

    Returns:
        (order, earliest)

    Raises:
        CycleDetectedError: if some courses can never reach in-degree zero
    """
    in_degree = {cid: len(graph.prereqs_of[cid]) for cid in graph.course_ids}
    earliest = {}

    level = [cid for cid in graph.course_ids if in_degree[cid] == 0]
    for cid in level:
        earliest[cid] = 0

    order = []
    while level:
        next_level = []
        for cid in level:
            order.append(cid)
            for dependent in graph.dependents_of[cid]:
                earliest[dependent] = max(earliest.get(dependent, 0), earliest[cid] + 1)
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    next_level.append(dependent)
        level = next_level

    if len(order) != len(graph):
        stuck = [graph.name_of(cid) for cid in graph.course_ids if in_degree[cid] > 0]
        raise CycleDetectedError(stuck)

    return tuple(order), earliest


def compute_latest(graph: PrereqGraph, order: tuple, target_id: Hashable,
                   target_offset: int) -> dict:
    """
    One reverse topological pass anchored on the target.

    The target is pinned to target_offset. Every prerequisite must finish
    strictly before the tightest latest slot among its dependents.
    """
    latest = {}
    if target_id in graph:
        latest[target_id] = target_offset

    for cid in reversed(order):
        bound = latest.get(cid)
        if bound is None:
            # No path to the target, so this course bounds none of its prereqs
            continue
        for prereq in graph.prereqs_of[cid]:
            latest[prereq] = min(latest.get(prereq, bound - 1), bound - 1)

    return latest


def compute_downstream_counts(graph: PrereqGraph, order: tuple) -> dict:
    """downstream[c] = sum over dependents d of (1 + downstream[d])."""
    downstream = {}
    for cid in reversed(order):
        downstream[cid] = sum(1 + downstream[dep] for dep in graph.dependents_of[cid])
    return downstream


def analyze(graph: PrereqGraph, target_id: Hashable) -> CriticalPath:
    """
    Run the three passes and bundle their results.

    The target lands at its own earliest offset: its prerequisite chain
    dictates the depth and the target cannot be delayed past it. When the
    target is not part of the graph (e.g., it was already completed), the
    deepest course stands in as the anchor.
    """
    order, earliest = topological_order(graph)

    if target_id in graph:
        target_offset = earliest[target_id]
    else:
        logger.warning("Target %r not in schedule set; anchoring on the deepest course", target_id)
        target_offset = max(earliest.values(), default=0)

    latest = compute_latest(graph, order, target_id, target_offset)
    downstream = compute_downstream_counts(graph, order)

    logger.debug("Critical path: target offset %d, %d bounded courses", target_offset, len(latest))
    return CriticalPath(
        order=order,
        earliest=earliest,
        latest=latest,
        downstream=downstream,
        target_offset=target_offset,
    )
