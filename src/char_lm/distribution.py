"""
Per-context character distributions.

A ContextDistribution holds one CharRecord for every character observed
after a fixed context string. Records keep their insertion order, with new
characters placed at the front, and that order drives both the cumulative
probabilities and the left-to-right sampling rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


class IndexOutOfRange(IndexError):
    """Raised on positional access outside a distribution's records."""


@dataclass
class CharRecord:
    """
    One observed outcome character for a context.

    Attributes:
        character: The observed next character
        count: How many times the character followed the context
        probability: count / total count of the context (after recomputation)
        cumulative_probability: Running sum of probabilities up to this record
    """

    character: str
    count: int = 1
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"{self.character} {self.count} {self.probability} {self.cumulative_probability}"


class ContextDistribution:
    """Ordered, unique-by-character collection of CharRecord objects."""

    def __init__(self) -> None:
        self._records: List[CharRecord] = []
        self._by_char: Dict[str, CharRecord] = {}
        self._dirty = False

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CharRecord]:
        self._refresh()
        return iter(self._records)

    def __contains__(self, character: object) -> bool:
        return character in self._by_char

    def __getitem__(self, index: int) -> CharRecord:
        return self.get(index)

    def __str__(self) -> str:
        self._refresh()
        return "(" + " ".join(str(rec) for rec in self._records) + ")"

    def __repr__(self) -> str:
        return f"ContextDistribution{self}"

    def record_occurrence(self, character: str) -> None:
        """Count one more occurrence of `character`, adding it at the front if new."""
        rec = self._by_char.get(character)
        if rec is not None:
            rec.count += 1
            self._dirty = True
            return
        rec = CharRecord(character=character)
        self._records.insert(0, rec)
        self._by_char[character] = rec
        self._dirty = True

    def recompute_probabilities(self) -> None:
        """Set probability and cumulative probability of every record from the counts."""
        self._dirty = False
        total = sum(rec.count for rec in self._records)
        if total == 0:
            return
        cp = 0.0
        for rec in self._records:
            rec.probability = rec.count / total
            cp += rec.probability
            rec.cumulative_probability = cp

    def _refresh(self) -> None:
        if self._dirty:
            self.recompute_probabilities()

    def sample(self, random_value: float) -> str:
        """
        Pick a character by threshold crossing.

        Returns the character of the first record (in iteration order) whose
        cumulative probability exceeds `random_value`.
        """
        if not 0.0 <= random_value < 1.0:
            raise ValueError(f"random_value must be in [0, 1), got {random_value}")
        if not self._records:
            raise ValueError("cannot sample from an empty distribution")
        self._refresh()
        for rec in self._records:
            if rec.cumulative_probability > random_value:
                return rec.character
        # Running sums can land a hair under 1.0
        return self._records[-1].character

    def find(self, character: str) -> Optional[CharRecord]:
        self._refresh()
        return self._by_char.get(character)

    def index_of(self, character: str) -> int:
        """Position of the record for `character`, or -1 if absent."""
        for i, rec in enumerate(self._records):
            if rec.character == character:
                return i
        return -1

    def remove(self, character: str) -> bool:
        rec = self._by_char.pop(character, None)
        if rec is None:
            return False
        self._records.remove(rec)
        self._dirty = True
        return True

    def get(self, index: int) -> CharRecord:
        if not 0 <= index < len(self._records):
            raise IndexOutOfRange(f"index {index} out of range for {len(self._records)} records")
        self._refresh()
        return self._records[index]

    def total_count(self) -> int:
        return sum(rec.count for rec in self._records)

    def to_list(self) -> List[CharRecord]:
        self._refresh()
        return list(self._records)
