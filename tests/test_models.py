"""
Tests for the data models.

Covers input validation on Course / CapacityConfig / PlanRequest and the
camelCase dictionaries produced for API responses.
"""

import pytest

from roadmap.models import (
    CapacityConfig,
    Course,
    Major,
    MajorRequirement,
    PlanExplanation,
    PlanRequest,
    PlanResult,
    PrereqEdge,
    QuarterPlan,
    QuarterTotals,
)


class TestCourse:
    def test_code_joins_dept_and_number(self, make_course):
        assert make_course(1, "20A").code == "MATH 20A"

    def test_units_max_below_min_rejected(self):
        with pytest.raises(ValueError):
            Course(id=1, dept="MATH", number="1", title="x", units_min=4, units_max=2)

    @pytest.mark.parametrize("field", ["difficulty", "workload"])
    def test_scores_outside_scale_rejected(self, field):
        with pytest.raises(ValueError):
            Course(id=1, dept="MATH", number="1", title="x", units_min=4, units_max=4,
                   **{field: 11})

    def test_typical_terms_upper_cased(self, make_course):
        c = make_course(1, "A", terms={"fa", "Wi"})
        assert c.typical_terms == frozenset({"FA", "WI"})

    def test_empty_typical_terms_means_every_term(self, make_course):
        c = make_course(1, "A")
        assert all(c.is_offered(code) for code in ("FA", "WI", "SP"))

    def test_restricted_offering(self, make_course):
        c = make_course(1, "A", terms={"WI"})
        assert c.is_offered("WI")
        assert not c.is_offered("FA")

    def test_from_dict_accepts_snake_case(self):
        c = Course.from_dict({
            "id": 7, "dept": "MATH", "number": 109, "title": "Mathematical Reasoning",
            "units_min": 2, "units_max": 4, "typical_terms": ["sp"],
        })
        assert c.number == "109"
        assert (c.units_min, c.units_max) == (2, 4)
        assert c.typical_terms == frozenset({"SP"})
        assert c.difficulty == 5

    def test_to_dict_round_trips_through_from_dict(self, make_course):
        c = make_course(3, "20C", difficulty=6, terms={"SP", "FA"})
        data = c.to_dict()
        assert data["typicalTerms"] == ["FA", "SP"]
        assert Course.from_dict(data) == c


class TestPrereqEdge:
    def test_from_dict_camel_case(self):
        edge = PrereqEdge.from_dict({"courseId": 3, "prereqCourseId": 2})
        assert edge == PrereqEdge(3, 2)
        assert edge.to_dict() == {"courseId": 3, "prereqCourseId": 2}


class TestCapacityConfig:
    def test_defaults(self):
        cap = CapacityConfig()
        assert (cap.max_units, cap.max_difficulty, cap.max_courses) == (16, 24, 4)

    @pytest.mark.parametrize("kwargs", [
        {"max_units": 0},
        {"max_difficulty": -1},
        {"max_courses": 0},
    ])
    def test_non_positive_caps_rejected(self, kwargs):
        with pytest.raises(ValueError):
            CapacityConfig(**kwargs)


class TestPlanRequest:
    def test_term_name_normalized(self):
        request = PlanRequest(target_course_id=1, target_term=" spring", target_year=2027,
                              courses=[])
        assert request.target_term == "Spring"
        assert request.courses == ()

    def test_unknown_term_rejected(self):
        with pytest.raises(ValueError):
            PlanRequest(target_course_id=1, target_term="Summer", target_year=2027, courses=[])


class TestPlanResult:
    def test_to_dict_shape(self, make_course):
        a = make_course(1, "A")
        quarter = QuarterPlan("Fall", 2026, [a], QuarterTotals(units=4, difficulty=5,
                                                              workload=5, course_count=1))
        result = PlanResult(plan=[quarter], unscheduled=[], explanation=PlanExplanation())

        data = result.to_dict()
        assert data["totalQuarters"] == 1
        assert data["totalUnits"] == 4
        assert data["plan"][0]["term"] == "Fall"
        assert data["plan"][0]["totals"]["courseCount"] == 1
        assert data["plan"][0]["totals"]["isHeavy"] is False
        assert data["explanation"] == {"blockers": [], "warnings": [], "suggestions": []}
        assert result.placement() == {1: ("Fall", 2026)}
        assert result.is_complete


class TestMajor:
    def test_from_api_listing_uses_count(self):
        major = Major.from_dict({"id": 1, "name": "Mathematics", "ucsdCode": "MA30",
                                 "_count": {"requirements": 30}})
        assert major.requirements == ()
        assert major.requirement_count == 30

    def test_from_catalog_counts_rows(self):
        major = Major.from_dict({"id": 1, "name": "Mathematics", "requirements": [
            {"courseId": 1, "groupName": "Lower Division", "required": True},
            {"courseId": 8, "groupName": "Upper Division Electives", "required": False},
        ]})
        assert major.requirement_count == 2
        assert major.requirements[1] == MajorRequirement(8, "Upper Division Electives", False)
        assert major.to_dict()["requirements"][0] == {
            "courseId": 1, "groupName": "Lower Division", "required": True,
        }
