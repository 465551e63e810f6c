"""
Per-Hand Strain Chain

Ordered sequence of StrainDataPoints for one hand. Walkers move through it by
index (`successor_index`) instead of following references stored on the data
points. The chain is filled by an external chain-builder; this module only
defines the traversal contract.
"""

from typing import Iterator, Optional

import numpy as np

from ..structures import Hand
from .data_point import StrainDataPoint


class StrainChain:
    """Time-ordered strain data points belonging to a single hand."""

    def __init__(self, hand: Hand):
        self.hand = hand
        self._points: list[StrainDataPoint] = []

    def append(self, point: StrainDataPoint) -> int:
        """
        Append the next data point on this hand.

        Args:
            point: Data point for the same hand, starting no earlier than the tail

        Returns:
            Index of the appended point
        """
        if point.hand != self.hand:
            raise ValueError(
                f"Cannot append a {point.hand.name} data point to a {self.hand.name} chain"
            )
        if self._points and point.start_time < self._points[-1].start_time:
            raise ValueError(
                f"Data point at {point.start_time} starts before the chain tail "
                f"at {self._points[-1].start_time}"
            )

        self._points.append(point)
        return len(self._points) - 1

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[StrainDataPoint]:
        return iter(self._points)

    def __getitem__(self, index: int) -> StrainDataPoint:
        return self._points[index]

    def successor_index(self, index: int) -> Optional[int]:
        """
        Index of the next point on this hand, or None at the tail.

        Negative indices count from the tail, as in `chain[index]`.
        """
        n_points = len(self._points)
        if index < -n_points or index >= n_points:
            raise IndexError(f"Chain index out of range: {index}")
        if index < 0:
            index += n_points
        nxt = index + 1
        return nxt if nxt < n_points else None

    def next_on_hand(self, index: int) -> Optional[StrainDataPoint]:
        nxt = self.successor_index(index)
        return None if nxt is None else self._points[nxt]

    def pairs(self) -> Iterator[tuple[StrainDataPoint, StrainDataPoint]]:
        """Yield (current, next) for every linked pair on this hand."""
        for current, nxt in zip(self._points, self._points[1:]):
            yield current, nxt

    def compute_all(self) -> None:
        """
        Solve finger state and strain value for every point.

        Runs each compute step once per point, so it must only be called once
        per chain (see `StrainDataPoint.compute_strain_value`).
        """
        for point in self._points:
            point.solve_finger_state()
            point.compute_strain_value()

    def strain_values(self) -> np.ndarray:
        """Total strain value per data point, in chain order."""
        return np.array([p.total_strain_value for p in self._points], dtype=np.float64)

    def start_times(self) -> np.ndarray:
        """Rate-scaled start time per data point, in chain order."""
        return np.array([p.start_time for p in self._points], dtype=np.float64)
