"""
Hand-scoped view of a hit object used by the strain solver.

Hand, finger action, finger state and the long note multiplier are assigned
by a finger-state classifier upstream; the strain solver only reads them and
writes back `strain_value`.
"""

import enum
from dataclasses import dataclass

from ..constants import DEFAULT_LN_STRAIN_MULTIPLIER
from .hit_object import HitObject


class Hand(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    AMBIGUOUS = "ambiguous"  # middle lane on odd key counts


class FingerAction(enum.Enum):
    NONE = "none"
    SIMPLE_JACK = "simple_jack"
    TECHNICAL_JACK = "technical_jack"
    ROLL = "roll"
    BRACKET = "bracket"


class FingerState(enum.IntFlag):
    """Bit flags for the fingers pressed on one hand."""

    NONE = 0
    INDEX = 1
    MIDDLE = 2
    RING = 4
    PINKIE = 8
    THUMB = 16


@dataclass
class ScopedHitObject:
    """A hit object with the hand/finger metadata the strain solver needs."""

    hit_object: HitObject
    hand: Hand
    finger_action: FingerAction = FingerAction.NONE
    finger_state: FingerState = FingerState.NONE
    ln_strain_multiplier: float = DEFAULT_LN_STRAIN_MULTIPLIER
    strain_value: float = 0.0  # written by StrainDataPoint.compute_strain_value

    @property
    def lane(self) -> int:
        return self.hit_object.lane

    @property
    def start_time(self) -> float:
        return self.hit_object.start_time

    @property
    def end_time(self) -> float:
        return self.hit_object.end_time
