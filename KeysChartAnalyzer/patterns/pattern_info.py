"""
Pattern Info

A detected pattern (currently only streams) and the chord composition of the
notes inside it. Chords are counted once at construction:
- 2 simultaneous notes: jump
- 3 simultaneous notes: hand
- 4 simultaneous notes: quad
- 5+ simultaneous notes: five-plus
"""

import enum
from typing import Sequence

import numpy as np

from ..constants import CHORD_FIVE_PLUS, CHORD_HAND, CHORD_JUMP, CHORD_QUAD
from ..errors import EmptyPatternError
from ..structures import HitObject


class PatternType(enum.Enum):
    STREAM = "stream"


class PatternInfo:
    """
    A run of hit objects classified as one pattern.

    `hit_objects` must be non-empty and time-ascending. Ordering is trusted,
    not re-checked: start/end come straight from the first and last element.
    """

    def __init__(
        self,
        pattern_type: PatternType,
        rate: float,
        hit_objects: Sequence[HitObject],
    ):
        """
        Args:
            pattern_type: Kind of pattern
            rate: Playback rate resolved from the active mods (> 0)
            hit_objects: Notes making up the pattern, time-ascending
        """
        if len(hit_objects) == 0:
            raise EmptyPatternError("Cannot create PatternInfo with zero objects")

        self.pattern_type = pattern_type
        self.rate = rate
        self.hit_objects: list[HitObject] = list(hit_objects)

        (
            self._jump_chord_count,
            self._hand_chord_count,
            self._quad_chord_count,
            self._five_plus_chord_count,
        ) = self._detect_chord_patterns()

    @property
    def start_time(self) -> float:
        return self.hit_objects[0].start_time / self.rate

    @property
    def end_time(self) -> float:
        return self.hit_objects[-1].start_time / self.rate

    @property
    def length(self) -> float:
        return self.end_time - self.start_time

    @property
    def jump_chord_count(self) -> int:
        return self._jump_chord_count

    @property
    def hand_chord_count(self) -> int:
        return self._hand_chord_count

    @property
    def quad_chord_count(self) -> int:
        return self._quad_chord_count

    @property
    def five_plus_chord_count(self) -> int:
        return self._five_plus_chord_count

    def _detect_chord_patterns(self) -> tuple[int, int, int, int]:
        """Group notes by scaled start time and tally chord sizes."""
        start_times = np.array(
            [h.start_time / self.rate for h in self.hit_objects], dtype=np.float64
        )
        _, group_sizes = np.unique(start_times, return_counts=True)

        jump = int(np.sum(group_sizes == CHORD_JUMP))
        hand = int(np.sum(group_sizes == CHORD_HAND))
        quad = int(np.sum(group_sizes == CHORD_QUAD))
        five_plus = int(np.sum(group_sizes >= CHORD_FIVE_PLUS))

        return jump, hand, quad, five_plus

    def describe(self) -> str:
        """Human-readable summary of the pattern and its chord shares."""
        n_objects = len(self.hit_objects)

        def share(count: int) -> str:
            return f"{count} ({count / n_objects * 100:.2f}%)"

        lines = [
            f"Detected {self.pattern_type.name.capitalize()} Pattern:",
            f"Start Time: {self.start_time}",
            f"End Time: {self.end_time}",
            f"Length: {self.length}",
            f"Objects: {n_objects}",
            f"Jump Count: {share(self.jump_chord_count)}",
            f"Hand Count: {share(self.hand_chord_count)}",
            f"Quad Count: {share(self.quad_chord_count)}",
            f"5+ Chord Count: {share(self.five_plus_chord_count)}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PatternInfo(type={self.pattern_type.name}, start_time={self.start_time}, "
            f"length={self.length}, objects={len(self.hit_objects)})"
        )
