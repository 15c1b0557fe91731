"""
Command-Line Interface for the Roadmap Planner.

This module provides the interactive CLI for the planning algorithm.
It handles user input and orchestrates the display of results.

NOTE: Don't run this file directly. Run from the repository root:
    python -m roadmap
"""

import logging
from datetime import date

from .advisor import RoadmapAdvisor
from .config import (
    DEFAULT_TRANSCRIPT,
    DEFAULT_MAX_UNITS,
    DEFAULT_MAX_DIFFICULTY,
    DEFAULT_MAX_COURSES,
    TERMS,
)
from .exceptions import CourseNotFoundError
from .models import CapacityConfig
from .ui import TerminalDisplay


def _ask(prompt: str, default: str) -> str:
    """input() with a default for empty answers and closed stdin."""
    try:
        answer = input(f"  {prompt} [{default}]: ").strip()
    except EOFError:
        answer = ""
    return answer or default


def _ask_int(prompt: str, default: int) -> int:
    answer = _ask(prompt, str(default))
    try:
        return int(answer)
    except ValueError:
        print(f"  → Not a number, using default: {default}")
        return default


def _select_from_major(advisor: RoadmapAdvisor):
    """
    Let the student browse a major's course list. Returns a course code,
    or None to fall back to typing one.
    """
    majors = advisor.list_majors()
    if not majors:
        return None

    print(f"\n  {TerminalDisplay.CYAN}Majors:{TerminalDisplay.RESET}")
    TerminalDisplay.print_major_list(majors)
    choice = _ask("Pick a major number, or 'skip' to type a course code", "skip")
    if not (choice.isdigit() and 1 <= int(choice) <= len(majors)):
        return None

    courses = advisor.major_courses(majors[int(choice) - 1].id)
    if not courses:
        print(f"  {TerminalDisplay.YELLOW}That major lists no courses.{TerminalDisplay.RESET}")
        return None

    TerminalDisplay.print_course_list(courses)
    pick = _ask("Course number", "1")
    if pick.isdigit() and 1 <= int(pick) <= len(courses):
        return courses[int(pick) - 1].code
    print("  → Not on the list, type a course code instead")
    return None


def _select_target(advisor: RoadmapAdvisor) -> str:
    """
    Ask for the target course, either from a major's course list or by
    code, offering search results when the code is not an exact match.
    """
    print(f"\n{TerminalDisplay.BOLD}Which course are you working towards?{TerminalDisplay.RESET}")
    picked = _select_from_major(advisor)
    if picked:
        return picked

    default = "MATH 140A"

    while True:
        code = _ask("Course code (e.g., MATH 140A)", default)
        if advisor.loader.find_by_code(code):
            return code

        matches = advisor.list_courses(code)
        if not matches:
            print(f"  {TerminalDisplay.YELLOW}No match for {code!r}. Using default: {default}{TerminalDisplay.RESET}")
            return default

        print(f"\n  {TerminalDisplay.CYAN}Did you mean:{TerminalDisplay.RESET}")
        TerminalDisplay.print_course_list(matches[:20])
        choice = _ask("Enter number, or a new code", "1")
        if choice.isdigit() and 1 <= int(choice) <= min(len(matches), 20):
            return matches[int(choice) - 1].code
        default = choice


def main():
    """
    Command-line interface for the roadmap planner.

    Prompts for the target course, the quarter it should be taken in,
    an optional transcript of completed courses, and per-quarter limits,
    then prints the plan.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    )
    advisor = RoadmapAdvisor()

    # Welcome banner
    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         QUARTER ROADMAP PLANNER                                  ║")
    print("║         Plan every prerequisite on the way to a target course    ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    target_code = _select_target(advisor)

    # When should the target course be taken?
    print(f"\n{TerminalDisplay.BOLD}When do you want to take it?{TerminalDisplay.RESET}")
    target_term = _ask(f"Term ({'/'.join(TERMS)})", "Spring").capitalize()
    if target_term not in TERMS:
        print("  → Unknown term, using default: Spring")
        target_term = "Spring"
    target_year = _ask_int("Year", date.today().year + 2)

    # Completed courses
    print(f"\n{TerminalDisplay.BOLD}Transcript of completed courses{TerminalDisplay.RESET}")
    print(f"  {TerminalDisplay.DIM}(path to a transcript JSON, or 'none' to plan from scratch){TerminalDisplay.RESET}")
    transcript = _ask("Transcript", str(DEFAULT_TRANSCRIPT))
    transcript_path = None if transcript.lower() == "none" else transcript

    # Limits
    print(f"\n{TerminalDisplay.BOLD}Per-quarter limits{TerminalDisplay.RESET}")
    max_units = _ask_int("Max units", DEFAULT_MAX_UNITS)
    max_difficulty = _ask_int("Max difficulty sum", DEFAULT_MAX_DIFFICULTY)
    max_courses = _ask_int("Max courses", DEFAULT_MAX_COURSES)

    print(f"\n{TerminalDisplay.DIM}Planning...{TerminalDisplay.RESET}")
    try:
        capacity = CapacityConfig(max_units, max_difficulty, max_courses)
        advisor.run(
            target_code=target_code,
            target_term=target_term,
            target_year=target_year,
            transcript_path=transcript_path,
            capacity=capacity,
        )
    except (CourseNotFoundError, FileNotFoundError, ValueError) as exc:
        print(f"\n  {TerminalDisplay.RED}Error: {exc}{TerminalDisplay.RESET}")
        return 1
    return 0


if __name__ == "__main__":
    main()
