"""
Shared fixtures for the roadmap test suite.

Small hand-built course sets are used for the planning engines; the
example catalog and transcript under data/ back the loader, parser,
and advisor tests.
"""

import pytest

from roadmap.config import DEFAULT_CATALOG, DEFAULT_TRANSCRIPT
from roadmap.data import CatalogLoader
from roadmap.models import Course, PrereqEdge


def course(cid, number, units=4, difficulty=5, workload=5, terms=(), dept="MATH", title=None):
    """Build a Course with sensible defaults for planner tests."""
    return Course(
        id=cid,
        dept=dept,
        number=number,
        title=title or f"Course {number}",
        units_min=units,
        units_max=units,
        difficulty=difficulty,
        workload=workload,
        typical_terms=frozenset(terms),
    )


def edges(*pairs):
    """edges((2, 1), (3, 2)) -> course 2 needs 1, course 3 needs 2."""
    return [PrereqEdge(course_id=c, prereq_course_id=p) for c, p in pairs]


# ============================================================================
# Fixtures - builders
# ============================================================================

@pytest.fixture
def make_course():
    return course


@pytest.fixture
def make_edges():
    return edges


# ============================================================================
# Fixtures - small course sets
# ============================================================================

@pytest.fixture
def linear_chain():
    """A -> B -> T, the smallest interesting plan."""
    courses = [course(1, "A"), course(2, "B"), course(3, "T")]
    return courses, edges((2, 1), (3, 2))


@pytest.fixture
def converging_chains():
    """
    A1 -> A2 -> A3 -> T plus two single-course branches B1 -> T, C1 -> T.

    The long chain fixes the target at offset 3; the short branches have
    slack and can float.
    """
    courses = [
        course(1, "A1"),
        course(2, "A2"),
        course(3, "A3"),
        course(4, "B1"),
        course(5, "C1"),
        course(6, "T"),
    ]
    return courses, edges((2, 1), (3, 2), (6, 3), (6, 4), (6, 5))


@pytest.fixture
def cyclic_set():
    """A and B require each other; T requires A."""
    courses = [course(1, "A"), course(2, "B"), course(3, "T")]
    return courses, edges((1, 2), (2, 1), (3, 1))


# ============================================================================
# Fixtures - catalog data
# ============================================================================

@pytest.fixture
def catalog_loader():
    """The example catalog shipped in data/."""
    return CatalogLoader(DEFAULT_CATALOG)


@pytest.fixture
def transcript_path():
    return DEFAULT_TRANSCRIPT


@pytest.fixture
def small_catalog_data():
    """In-memory catalog: 20A -> 20B -> 20C, plus 18; 102 needs 18 and 20C."""
    return {
        "courses": [
            {"id": 1, "dept": "MATH", "number": "18", "title": "Linear Algebra",
             "unitsMin": 4, "unitsMax": 4, "difficulty": 5, "workload": 5, "typicalTerms": []},
            {"id": 2, "dept": "MATH", "number": "20A", "title": "Calculus I",
             "unitsMin": 4, "unitsMax": 4, "difficulty": 4, "workload": 5, "typicalTerms": []},
            {"id": 3, "dept": "MATH", "number": "20B", "title": "Calculus II",
             "unitsMin": 4, "unitsMax": 4, "difficulty": 5, "workload": 5, "typicalTerms": []},
            {"id": 4, "dept": "MATH", "number": "20C", "title": "Calculus III",
             "unitsMin": 4, "unitsMax": 4, "difficulty": 6, "workload": 6, "typicalTerms": []},
            {"id": 5, "dept": "MATH", "number": "102", "title": "Applied Linear Algebra",
             "unitsMin": 4, "unitsMax": 4, "difficulty": 6, "workload": 6, "typicalTerms": ["wi"]},
        ],
        "edges": [
            {"courseId": 3, "prereqCourseId": 2},
            {"courseId": 4, "prereqCourseId": 3},
            {"courseId": 5, "prereqCourseId": 1},
            {"courseId": 5, "prereqCourseId": 4},
        ],
    }


@pytest.fixture
def small_catalog(small_catalog_data):
    return CatalogLoader.from_data(small_catalog_data)
