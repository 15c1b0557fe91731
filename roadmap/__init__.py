"""
Quarter Roadmap Planner Package
===============================

Plans the sequence of quarters a student needs to reach a target course,
respecting prerequisite order and per-quarter workload limits.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────┐  ┌─────────────────┐  ┌───────────────────────────┐   │
│  │CatalogLoader │  │TranscriptParser │  │      RoadmapEngine        │   │
│  │ (I/O)        │  │ (parsing)       │  │ (prerequisite closure)    │   │
│  └──────────────┘  └─────────────────┘  └───────────────────────────┘   │
│                                                                         │
│  ┌───────────────────────────────────────────────────────────────────┐  │
│  │                        QuarterPlanner                             │  │
│  │  build_graph → analyze → TermAllocator → PlanAssembler            │  │
│  └───────────────────────────────────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│                         TerminalDisplay                                 │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        RoadmapAdvisor                                    │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

roadmap/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── exceptions.py        # RoadmapError and friends
├── advisor.py           # RoadmapAdvisor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # Course, PrereqEdge, TranscriptCourse
│   ├── plan.py          # PlanRequest, QuarterPlan, PlanResult, ...
│   ├── major.py         # Major, MajorRequirement
│   └── roadmap.py       # Roadmap
│
├── data/                # Data loading and parsing
│   ├── loader.py        # CatalogLoader
│   ├── parser.py        # TranscriptParser
│   └── client.py        # RoadmapClient (HTTP)
│
├── engines/             # Planning engines
│   ├── graph.py         # build_graph
│   ├── critical_path.py # earliest / latest / downstream
│   ├── calendar.py      # offset <-> (term, year)
│   ├── allocator.py     # TermAllocator
│   ├── assembler.py     # PlanAssembler
│   ├── planner.py       # QuarterPlanner
│   └── roadmap.py       # RoadmapEngine
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

Planning from raw data:

    from roadmap import plan_schedule, Course, PrereqEdge

    result = plan_schedule(
        target_course_id=3,
        target_term="Spring",
        target_year=2027,
        courses=[a, b, target],
        edges=[PrereqEdge(2, 1), PrereqEdge(3, 2)],
    )
    for quarter in result.plan:
        print(quarter.label, [c.code for c in quarter.courses])

Planning against the catalog:

    advisor = RoadmapAdvisor()
    advisor.run("MATH 140A", "Spring", 2027, transcript_path="transcript.json")

Running from command line:

    python -m roadmap

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import RoadmapAdvisor
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Course,
    PrereqEdge,
    CourseStatus,
    TranscriptCourse,
    CapacityConfig,
    ScoringWeights,
    PlanRequest,
    QuarterTotals,
    QuarterPlan,
    PlanExplanation,
    PlanResult,
    Roadmap,
    Major,
    MajorRequirement,
)

# Engine exports (for advanced use)
from .engines import (
    QuarterPlanner,
    plan_schedule,
    RoadmapEngine,
)

# Data exports
from .data import CatalogLoader, TranscriptParser, RoadmapClient

# UI exports
from .ui import TerminalDisplay

# Exceptions
from .exceptions import (
    RoadmapError,
    CycleDetectedError,
    CourseNotFoundError,
    RoadmapAPIError,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "RoadmapAdvisor",
    "main",
    # Models
    "Course",
    "PrereqEdge",
    "CourseStatus",
    "TranscriptCourse",
    "CapacityConfig",
    "ScoringWeights",
    "PlanRequest",
    "QuarterTotals",
    "QuarterPlan",
    "PlanExplanation",
    "PlanResult",
    "Roadmap",
    "Major",
    "MajorRequirement",
    # Engines
    "QuarterPlanner",
    "plan_schedule",
    "RoadmapEngine",
    # Data
    "CatalogLoader",
    "TranscriptParser",
    "RoadmapClient",
    # UI
    "TerminalDisplay",
    # Exceptions
    "RoadmapError",
    "CycleDetectedError",
    "CourseNotFoundError",
    "RoadmapAPIError",
]
