"""
Chart Structures for Keys Maps

Plain note and chart containers consumed by the analyzers. Times are raw
milliseconds; rate scaling is applied by the consumers, never stored here.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class HitObject:
    """A single note bound to one lane."""

    lane: int  # 1..K
    start_time: float  # ms
    end_time: Optional[float] = None  # ms, equal to start_time for taps

    def __post_init__(self):
        if self.end_time is None:
            object.__setattr__(self, "end_time", self.start_time)

    @property
    def is_long_note(self) -> bool:
        return self.end_time > self.start_time


@dataclass(frozen=True)
class Chart:
    """
    An ordered, time-ascending collection of hit objects.

    Treated as read-only by every analysis, so one chart can be shared
    between analyzers running on separate threads.
    """

    hit_objects: Sequence[HitObject] = field(default_factory=tuple)
    length: float = 0.0  # total chart duration in ms
    key_count: int = 4
    title: Optional[str] = None

    def __post_init__(self):
        # Always held as a tuple
        object.__setattr__(self, "hit_objects", tuple(self.hit_objects))

    @classmethod
    def from_hit_objects(
        cls,
        hit_objects: Iterable[HitObject],
        length: Optional[float] = None,
        key_count: int = 4,
        title: Optional[str] = None,
    ) -> "Chart":
        """
        Build a chart from unordered hit objects.

        Args:
            hit_objects: Notes in any order
            length: Chart duration in ms (defaults to the latest end time)
            key_count: Number of lanes
            title: Optional display name

        Returns:
            Chart with notes sorted by (start_time, lane)
        """
        ordered = sorted(hit_objects, key=lambda h: (h.start_time, h.lane))

        if length is None:
            length = max((h.end_time for h in ordered), default=0.0)

        return cls(
            hit_objects=ordered, length=float(length), key_count=key_count, title=title
        )

    @property
    def object_count(self) -> int:
        return len(self.hit_objects)

    def __str__(self) -> str:
        name = self.title or "Untitled"
        return f"{name} ({self.key_count}K, {self.object_count} objects)"
