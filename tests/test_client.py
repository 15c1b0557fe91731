"""
Tests for RoadmapClient.

The HTTP session is replaced by a small fake so no network is touched.
"""

import pytest
import requests

from roadmap.config import API_RETRIES
from roadmap.data import RoadmapClient
from roadmap.data.client import create_retry_session
from roadmap.exceptions import CourseNotFoundError, RoadmapAPIError


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def course_record(cid, number, depth):
    return {"id": cid, "dept": "MATH", "number": number, "title": f"Course {number}",
            "unitsMin": 4, "unitsMax": 4, "difficulty": 5, "workload": 5,
            "typicalTerms": [], "depth": depth}


ROADMAP_PAYLOAD = {
    "targetCourse": course_record(3, "20B", 0),
    "prerequisites": [course_record(2, "20A", 1)],
    "edges": [
        {"courseId": 3, "prereqCourseId": 2},
        {"courseId": 3, "prereqCourseId": 2},
    ],
}


class TestRetrySession:
    def test_adapters_retry_on_server_errors(self):
        session = create_retry_session()
        retries = session.get_adapter("https://planner.example.edu").max_retries
        assert retries.total == API_RETRIES
        assert 503 in retries.status_forcelist
        assert session.get_adapter("http://localhost").max_retries.total == API_RETRIES


class TestGetRoadmap:
    def test_parses_payload(self):
        session = FakeSession(FakeResponse(payload=ROADMAP_PAYLOAD))
        client = RoadmapClient("http://api.test/api/", session=session, timeout=3)

        roadmap = client.get_roadmap(3)

        assert session.calls == [("http://api.test/api/roadmap", {"courseId": 3}, 3)]
        assert roadmap.target.code == "MATH 20B"
        assert [c.code for c in roadmap.prerequisites] == ["MATH 20A"]
        assert roadmap.depth_of(2) == 1

    def test_fetch_catalog_dedupes_edges(self):
        client = RoadmapClient("http://api.test", session=FakeSession(FakeResponse(payload=ROADMAP_PAYLOAD)))
        catalog = client.fetch_catalog(3)
        assert [c["id"] for c in catalog["courses"]] == [3, 2]
        assert catalog["edges"] == [{"courseId": 3, "prereqCourseId": 2}]

    def test_not_found(self):
        client = RoadmapClient("http://api.test", session=FakeSession(FakeResponse(404)))
        with pytest.raises(CourseNotFoundError):
            client.get_roadmap(999)

    def test_server_error_keeps_status(self):
        client = RoadmapClient("http://api.test", session=FakeSession(FakeResponse(500, text="boom")))
        with pytest.raises(RoadmapAPIError) as excinfo:
            client.get_roadmap(3)
        assert excinfo.value.status_code == 500

    def test_connection_error(self):
        session = FakeSession(error=requests.ConnectionError("refused"))
        client = RoadmapClient("http://api.test", session=session)
        with pytest.raises(RoadmapAPIError):
            client.get_roadmap(3)

    def test_invalid_json(self):
        client = RoadmapClient("http://api.test", session=FakeSession(FakeResponse(200)))
        with pytest.raises(RoadmapAPIError):
            client.get_roadmap(3)


class TestSearchCourses:
    def test_returns_courses(self):
        payload = {"courses": [course_record(1, "18", 0)]}
        session = FakeSession(FakeResponse(payload=payload))
        with RoadmapClient("http://api.test", session=session) as client:
            courses = client.search_courses("linear")
        assert [c.code for c in courses] == ["MATH 18"]
        assert session.calls[0][1] == {"query": "linear"}
        assert session.closed

    def test_major_course_list(self):
        payload = {"courses": [course_record(1, "18", 0), course_record(2, "20A", 0)]}
        session = FakeSession(FakeResponse(payload=payload))
        client = RoadmapClient("http://api.test", session=session)

        courses = client.search_courses(major_id=1)

        assert [c.code for c in courses] == ["MATH 18", "MATH 20A"]
        assert session.calls[0][:2] == ("http://api.test/courses", {"query": "", "majorId": 1})


class TestListMajors:
    def test_parses_majors_with_counts(self):
        payload = {"majors": [
            {"id": 1, "name": "Mathematics", "ucsdCode": "MA30", "_count": {"requirements": 30}},
        ]}
        session = FakeSession(FakeResponse(payload=payload))
        majors = RoadmapClient("http://api.test", session=session).list_majors()

        assert session.calls[0][0] == "http://api.test/majors"
        assert [(m.name, m.code, m.requirement_count) for m in majors] == [("Mathematics", "MA30", 30)]
