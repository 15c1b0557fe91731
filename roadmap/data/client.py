"""
Roadmap API client.

Fetches prerequisite trees and course search results from a running
roadmap web service, converting its JSON into the package's models.
"""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import API_BASE_URL, API_TIMEOUT, API_RETRIES, API_BACKOFF_FACTOR
from ..exceptions import CourseNotFoundError, RoadmapAPIError
from ..models import Course, Major, PrereqEdge, Roadmap

logger = logging.getLogger(__name__)


def create_retry_session() -> requests.Session:
    """Session that backs off on rate limiting and server errors."""
    session = requests.Session()
    retries = Retry(
        total=API_RETRIES,
        backoff_factor=API_BACKOFF_FACTOR,  # Wait 2s, 4s, 8s, 16s... on 429 errors
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


class RoadmapClient:
    """
    Thin client for the roadmap HTTP API.

    ENDPOINTS:
        GET /roadmap?courseId=<id>   -> {targetCourse, prerequisites, edges}
        GET /courses?query=<text>    -> {courses: [...]}
        GET /courses?majorId=<id>    -> {courses: [...]}
        GET /majors                  -> {majors: [{id, name, ucsdCode, _count}]}

    Usage:
        with RoadmapClient("https://planner.example.edu/api") as client:
            roadmap = client.get_roadmap(12)
    """

    def __init__(self, base_url: str = API_BASE_URL, session: requests.Session = None,
                 timeout: float = API_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.session = session or create_retry_session()
        self.timeout = timeout

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.session.close()

    def _get(self, path: str, params: dict) -> dict:
        url = f"{self.base_url}/{path}"
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RoadmapAPIError(f"Request to {url} failed: {exc}") from exc

        if resp.status_code == 404:
            raise CourseNotFoundError(f"Not found: {url} {params}")
        if resp.status_code != 200:
            raise RoadmapAPIError(
                f"{url} answered {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise RoadmapAPIError(f"{url} returned invalid JSON") from exc

    def get_roadmap(self, course_id) -> Roadmap:
        """Prerequisite tree of one course, with depths from the server."""
        data = self._get("roadmap", {"courseId": course_id})
        target_data = data["targetCourse"]
        prereq_data = data.get("prerequisites", [])

        depths = {target_data["id"]: target_data.get("depth", 0)}
        for record in prereq_data:
            depths[record["id"]] = record.get("depth", 0)

        roadmap = Roadmap(
            target=Course.from_dict(target_data),
            prerequisites=[Course.from_dict(r) for r in prereq_data],
            edges=[PrereqEdge.from_dict(e) for e in data.get("edges", [])],
            depths=depths,
        )
        logger.info(
            "Fetched roadmap for %s: %d prerequisite(s)",
            roadmap.target.code,
            len(roadmap.prerequisites),
        )
        return roadmap

    def search_courses(self, query: str = "", major_id=None) -> list:
        """
        Course search by text, or the course list of one major.

        The server gives major_id precedence over query.
        """
        params = {"query": query}
        if major_id is not None:
            params["majorId"] = major_id
        data = self._get("courses", params)
        return [Course.from_dict(r) for r in data.get("courses", [])]

    def list_majors(self) -> list:
        """Majors ordered by name, each with its requirement count."""
        data = self._get("majors", {})
        return [Major.from_dict(r) for r in data.get("majors", [])]

    def fetch_catalog(self, course_id) -> dict:
        """
        Roadmap of one course in the on-disk catalog format, so it can be
        saved and loaded later with CatalogLoader.
        """
        roadmap = self.get_roadmap(course_id)
        # dict.fromkeys dedupes while keeping order
        edges = list(dict.fromkeys(roadmap.edges))
        return {
            "courses": [c.to_dict() for c in roadmap.courses],
            "edges": [e.to_dict() for e in edges],
        }
