"""
Skillsets reported by the pattern analyzer.
"""

import enum


class Skillset(enum.Enum):
    NONE = "none"  # sentinel, never reported
    STREAM = "stream"
    TOTAL_JUMPSTREAM = "total_jumpstream"
    RELATIVE_JUMPSTREAM = "relative_jumpstream"
    TOTAL_HANDSTREAM = "total_handstream"
    RELATIVE_HANDSTREAM = "relative_handstream"
    TOTAL_QUADSTREAM = "total_quadstream"
    RELATIVE_QUADSTREAM = "relative_quadstream"


# Every skillset present in an analysis result, in report order
REPORTED_SKILLSETS = [s for s in Skillset if s is not Skillset.NONE]
