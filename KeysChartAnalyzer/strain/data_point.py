"""
Strain Data Point

A data point is one chord (notes sharing a start time on one hand) together
with the strain coefficients assigned to it. It computes:
- the aggregate strain value of the chord (mean of per-note strain)
- the combined finger state of the hand at that point in time
"""

from typing import Optional

from ..constants import DEFAULT_STRAIN_COEFFICIENT
from ..structures import FingerAction, FingerState, ScopedHitObject


class StrainDataPoint:
    """
    Chorded hit objects at one start time for a given hand.

    Coefficients are assigned externally before `compute_strain_value()` runs:
    1. action_strain_coefficient: base strain of the finger action
    2. pattern_strain_multiplier: contextual pattern difficulty
    3. roll_manipulation_strain_multiplier: discount for patterns playable as rolls
    4. jack_manipulation_strain_multiplier: discount for patterns playable as long jacks

    Successor links are not stored here; see `StrainChain`.
    """

    def __init__(self, hit_object: ScopedHitObject, rate: float = 1.0):
        """
        Args:
            hit_object: First member of the chord
            rate: Playback rate (> 0), divides raw timestamps
        """
        self.start_time = hit_object.start_time / rate
        # Fixed from the first member; later chorded members never extend it
        self.end_time = hit_object.end_time / rate
        self.hit_objects: list[ScopedHitObject] = [hit_object]
        self.hand = hit_object.hand

        self.action_strain_coefficient = DEFAULT_STRAIN_COEFFICIENT
        self.pattern_strain_multiplier = DEFAULT_STRAIN_COEFFICIENT
        self.roll_manipulation_strain_multiplier = DEFAULT_STRAIN_COEFFICIENT
        self.jack_manipulation_strain_multiplier = DEFAULT_STRAIN_COEFFICIENT

        self.total_strain_value = 0.0
        self.finger_action = FingerAction.NONE
        self.finger_action_duration_ms = 0.0
        self.finger_state = FingerState.NONE
        self.pattern: Optional[str] = None

    def add_hit_object(self, hit_object: ScopedHitObject) -> None:
        """Append a chorded member (same scaled start time, same hand)."""
        self.hit_objects.append(hit_object)

    @property
    def hand_chord(self) -> bool:
        """Whether more than one note is pressed on this hand at once."""
        return len(self.hit_objects) > 1

    @property
    def strain_multiplier(self) -> float:
        return (
            self.action_strain_coefficient
            * self.pattern_strain_multiplier
            * self.roll_manipulation_strain_multiplier
            * self.jack_manipulation_strain_multiplier
        )

    def compute_strain_value(self) -> float:
        """
        Calculate the strain value of this point.

        Each member gets `strain_multiplier * ln_strain_multiplier` written to
        its `strain_value`; the point's total is the mean over the chord.

        Must be called exactly once, after coefficients and members are final.
        `total_strain_value` is not reset, so a second call accumulates on top
        of the previous result.

        Returns:
            The updated total_strain_value
        """
        for hit_object in self.hit_objects:
            hit_object.strain_value = (
                self.strain_multiplier * hit_object.ln_strain_multiplier
            )
            self.total_strain_value += hit_object.strain_value

        self.total_strain_value /= len(self.hit_objects)
        return self.total_strain_value

    def solve_finger_state(self) -> FingerState:
        """Union of every member's finger state."""
        for hit_object in self.hit_objects:
            self.finger_state |= hit_object.finger_state
        return self.finger_state

    def __repr__(self) -> str:
        return (
            f"StrainDataPoint(start_time={self.start_time}, hand={self.hand.name}, "
            f"objects={len(self.hit_objects)}, total_strain_value={self.total_strain_value})"
        )
