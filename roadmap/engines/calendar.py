"""
Quarter offset <-> calendar translation.

The planner works on integer offsets; students think in "Winter 2026".
A CalendarAnchor ties the target course's offset to the term and year the
student asked for, and every other offset is a constant shift from there.
"""

from dataclasses import dataclass

from ..config import TERMS, TERM_CODES, term_index


def shift_term(term: str, year: int, delta: int) -> tuple:
    """
    Move delta quarters from (term, year) along the Fall/Winter/Spring cycle.

    The year changes only when the cycle wraps between Spring and Fall.
    Negative deltas walk backwards.

    Example:
        shift_term("Spring", 2026, 1)   -> ("Fall", 2027)
        shift_term("Fall", 2026, -1)    -> ("Spring", 2025)
    """
    position = term_index(term) + delta
    return TERMS[position % len(TERMS)], year + position // len(TERMS)


@dataclass(frozen=True)
class CalendarAnchor:
    """
    Pins one quarter offset to a named term and year.

    Passed explicitly to every phase that needs calendar information, so
    the allocator's offering checks and the final labels always agree.

    YEAR LABELS: a year names the academic year a quarter sits in, and the
    label only changes between Spring and Fall. Fall 2027, Winter 2027 and
    Spring 2027 run in that order, so "Fall 2027" comes BEFORE "Spring 2027"
    and right after "Spring 2026".
    """
    term: str
    year: int
    offset: int

    def label(self, offset: int) -> tuple:
        """(term, year) of a quarter offset."""
        return shift_term(self.term, self.year, offset - self.offset)

    def term_code(self, offset: int) -> str:
        """Offering code ("FA", "WI", "SP") of a quarter offset."""
        term, _ = self.label(offset)
        return TERM_CODES[term]

    def describe(self, offset: int) -> str:
        term, year = self.label(offset)
        return f"{term} {year}"
