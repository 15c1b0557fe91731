"""
Roadmap Advisor - Main Orchestrator.

This module contains the RoadmapAdvisor class that connects the
algorithm layer to the presentation layer.

NOTE: Don't run this file directly. Run from the repository root:
    python -m roadmap
"""

import json
import logging
from typing import Iterable, Optional

from .data import CatalogLoader, TranscriptParser
from .engines import QuarterPlanner, RoadmapEngine
from .exceptions import CourseNotFoundError
from .models import CapacityConfig, PlanRequest, PlanResult, ScoringWeights
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class RoadmapAdvisor:
    """
    Main interface for the roadmap planner.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Resolves the target course in the catalog
    2. Works out which prerequisites the student still needs
    3. Calls the planner to get a PlanResult (pure data)
    4. Passes that data to the presentation layer for display

    TO CHANGE THE UI:
    -----------------
    Pass a different display object, or call build_plan() and serialize the
    result yourself:

        return advisor.build_plan("MATH 140A", "Spring", 2027).to_dict()

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = RoadmapAdvisor()
        result = advisor.run(
            target_code="MATH 140A",
            target_term="Spring",
            target_year=2027,
            transcript_path="data/example_transcript.json",
        )
    """

    def __init__(self, loader: Optional[CatalogLoader] = None, display=None):
        # Initialize all components with shared CatalogLoader
        self.loader = loader or CatalogLoader()
        self.roadmap_engine = RoadmapEngine(self.loader)
        self.transcript_parser = TranscriptParser(self.loader)
        self.planner = QuarterPlanner()
        self.display = display or TerminalDisplay()

    def resolve(self, target_code: str):
        course = self.loader.find_by_code(target_code)
        if course is None:
            raise CourseNotFoundError(f"No course {target_code!r} in the catalog")
        return course

    def build_plan(self, target_code: str, target_term: str, target_year: int,
                   completed_ids: Iterable = (), capacity: Optional[CapacityConfig] = None,
                   weights: Optional[ScoringWeights] = None) -> PlanResult:
        """
        Plan the quarters leading to a target course without printing.

        Raises:
            CourseNotFoundError: the target code is not in the catalog
            ValueError: unknown term name
        """
        target = self.resolve(target_code)
        courses, edges = self.roadmap_engine.schedule_set(target.id, completed_ids)

        request = PlanRequest(
            target_course_id=target.id,
            target_term=target_term,
            target_year=target_year,
            courses=courses,
            edges=edges,
            capacity=capacity or CapacityConfig(),
            weights=weights or ScoringWeights(),
        )
        return self.planner.plan(request)

    def load_transcript(self, transcript_path: str) -> dict:
        with open(transcript_path, "r", encoding="utf-8") as f:
            transcript_data = json.load(f)
        return self.transcript_parser.parse(transcript_data)

    def run(self, target_code: str, target_term: str, target_year: int,
            transcript_path: Optional[str] = None,
            capacity: Optional[CapacityConfig] = None) -> PlanResult:
        """
        Run a complete planning session and display results.

        This is the main entry point for the roadmap planner. It:
        1. Loads and parses the student's transcript (if given)
        2. Shows the prerequisite tree of the target
        3. Plans the remaining courses
        4. Displays the plan and its explanation

        Returns:
            The PlanResult that was displayed
        """
        completed_ids = set()

        # STEP 1: Load and parse transcript
        if transcript_path:
            student_state = self.load_transcript(transcript_path)
            completed_ids = student_state["completed_ids"]
            self.display.print_student_info(student_state["student"])
            if student_state["unmatched"]:
                logger.info(
                    "Transcript courses not in catalog: %s",
                    ", ".join(c.code for c in student_state["unmatched"]),
                )

        # STEP 2: Display prerequisite tree
        target = self.resolve(target_code)
        self.display.print_roadmap(self.roadmap_engine.build(target.id), completed_ids)

        # STEP 3: Plan
        result = self.build_plan(target_code, target_term, target_year, completed_ids, capacity)

        # STEP 4: Display
        self.display.print_plan(result, target)
        return result

    def list_courses(self, query: str) -> list:
        """Search the catalog (department/number or title)."""
        return self.loader.search(query)

    def list_majors(self) -> list:
        return self.loader.list_majors()

    def major_courses(self, major_id, group: Optional[str] = None) -> list:
        """Courses a major lists, for picking a target."""
        return self.loader.courses_for_major(major_id, group)
