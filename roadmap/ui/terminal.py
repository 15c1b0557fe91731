"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the roadmap package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import Course, PlanExplanation, PlanResult, QuarterPlan, Roadmap


class TerminalDisplay:
    """
    Pretty terminal output for quarter plans.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and return PlanResult.to_dict().

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, complete: bool, partial: bool = False) -> str:
        """Return a colored status badge."""
        if complete:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ ON TRACK {cls.RESET}"
        elif partial:
            return f"{cls.BG_YELLOW}{cls.WHITE} ⚠ PARTIAL {cls.RESET}"
        else:
            return f"{cls.BG_RED}{cls.WHITE} ✗ BLOCKED {cls.RESET}"

    @classmethod
    def print_student_info(cls, student: dict):
        """Print student identification information."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.get('name', 'Unknown')}")
        print(f"  {cls.BOLD}Institution:{cls.RESET} {student.get('institution', 'Unknown')}")

    @classmethod
    def print_roadmap(cls, roadmap: Roadmap, completed_ids: set = frozenset()):
        """Print the prerequisite tree, deepest prerequisites last."""
        cls.print_header(f"ROADMAP: {roadmap.target.code}: {roadmap.target.title}")
        if not roadmap.prerequisites:
            print(f"\n  {cls.DIM}(no prerequisites){cls.RESET}")
            return

        print(f"\n  {cls.BOLD}{'DEPTH':<7} {'COURSE':<12} {'TITLE'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for course in roadmap.prerequisites:
            done = course.id in completed_ids
            color = cls.GREEN if done else cls.WHITE
            mark = f" {cls.GREEN}✓{cls.RESET}" if done else ""
            print(f"  {roadmap.depth_of(course.id):<7} {color}{course.code:<12}{cls.RESET} "
                  f"{cls._truncate(course.title, 44)}{mark}")

    @classmethod
    def print_plan(cls, result: PlanResult, target: Course = None):
        """Print the full plan: quarters, unscheduled courses, explanation."""
        title = f"QUARTER PLAN: {target.code}" if target else "QUARTER PLAN"
        cls.print_header(title)

        status = cls.status_badge(result.is_complete, partial=bool(result.plan))
        print(f"\n  {cls.BOLD}Status:{cls.RESET} {status}")
        print(f"  {cls.BOLD}Quarters:{cls.RESET} {len(result.plan)}   "
              f"{cls.BOLD}Total Units:{cls.RESET} {result.total_units}")

        for quarter in result.plan:
            cls._print_quarter(quarter)

        if result.unscheduled:
            cls.print_subheader("Unscheduled")
            for course in result.unscheduled:
                print(f"  {cls.RED}✗{cls.RESET} {course.code:<12} {cls._truncate(course.title, 50)}")

        cls.print_explanation(result.explanation)
        print()

    @classmethod
    def _print_quarter(cls, quarter: QuarterPlan):
        totals = quarter.totals
        heavy = f" {cls.YELLOW}⚠ HEAVY{cls.RESET}" if totals.is_heavy else ""
        cls.print_subheader(f"{quarter.term} {quarter.year}")
        print(f"  {cls.BOLD}{'COURSE':<12} {'TITLE':<40} {'UNITS':>5} {'DIFF':>5}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for course in quarter.courses:
            print(f"  {cls.CYAN}{course.code:<12}{cls.RESET} {cls._truncate(course.title, 40):<40} "
                  f"{course.units_max:>5} {course.difficulty:>5}")
        print(f"  {cls.DIM}{'Total':<53}{cls.RESET} {totals.units:>5} {totals.difficulty:>5}{heavy}")

    @classmethod
    def print_explanation(cls, explanation: PlanExplanation):
        if explanation.blockers:
            cls.print_subheader("Blockers")
            for line in explanation.blockers:
                print(f"  {cls.RED}✗{cls.RESET} {line}")
        if explanation.warnings:
            cls.print_subheader("Warnings")
            for line in explanation.warnings:
                print(f"  {cls.YELLOW}⚠{cls.RESET} {line}")
        if explanation.suggestions:
            cls.print_subheader("Suggestions")
            for line in explanation.suggestions:
                print(f"  {cls.GREEN}→{cls.RESET} {line}")

    @classmethod
    def print_course_list(cls, courses: list):
        """Print search results."""
        if not courses:
            print(f"  {cls.DIM}(no matching courses){cls.RESET}")
            return
        for i, course in enumerate(courses, 1):
            print(f"    {i:>2}. {cls.BOLD}{course.code:<12}{cls.RESET} {cls._truncate(course.title, 50)}")

    @staticmethod
    def _truncate(text: str, width: int) -> str:
        return text[:width - 3] + "..." if len(text) > width else text

    @classmethod
    def print_major_list(cls, majors: list):
        """Print majors with their requirement counts."""
        for i, major in enumerate(majors, 1):
            code = f" ({major.code})" if major.code else ""
            print(f"    {i:>2}. {cls.BOLD}{major.name}{cls.RESET}{code} "
                  f"{cls.DIM}{major.requirement_count} courses{cls.RESET}")
