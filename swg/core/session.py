"""Session state and accuracy scoring: pure logic, no UI."""

from enum import Enum

TARGET_MIN = 5.0
TARGET_MAX = 30.0
DEFAULT_TARGET = 5.0
# The target picker moves in whole seconds
TARGET_STEP = 1.0

# Upper bounds (exclusive) for each bucket, checked in order. Anything at or above the last bound is a miss.
_BUCKETS = (
    (0.01, "perfect"),
    (0.5, "great"),
    (1.0, "good"),
    (3.0, "close"),
)


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    RESULT = "result"


class Severity(Enum):
    PERFECT = "perfect"
    GREAT = "great"
    GOOD = "good"
    CLOSE = "close"
    MISS = "miss"


def classify(diff):
    """Map an absolute error in seconds to its Severity bucket.

    Buckets are half-open ``[lower, upper)`` and evaluated lowest first, so
    ``0.5`` is GOOD, not GREAT.
    """
    diff = abs(float(diff))
    for upper, name in _BUCKETS:
        if diff < upper:
            return Severity(name)
    return Severity.MISS


def clamp_target(value):
    return min(TARGET_MAX, max(TARGET_MIN, float(value)))


# Clamp, then round to the picker step so a stored target always matches a slider position.
def snap_target(value):
    return clamp_target(round(float(value) / TARGET_STEP) * TARGET_STEP)


class Session:
    """The single play-through record the window renders.

    ``is_running`` and ``has_result`` are never both true; when neither is,
    the session is idle and the target can be changed.
    """

    def __init__(self, target_seconds=DEFAULT_TARGET):
        self.target_seconds = clamp_target(target_seconds)
        self.elapsed_seconds = 0.0
        self.is_running = False
        self.has_result = False
        self.result_message = ""
        self.result_severity = None
        self.result_diff = None

    @property
    def phase(self):
        if self.is_running:
            return Phase.RUNNING
        if self.has_result:
            return Phase.RESULT
        return Phase.IDLE

    def __repr__(self):
        return (f"Session(target={self.target_seconds}, elapsed={self.elapsed_seconds:.2f}, "
                f"phase={self.phase.value}, severity={self.result_severity and self.result_severity.value})")
