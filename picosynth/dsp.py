"""Sample conditioning used while recording from the microphone and playing to the buzzer."""

from collections import deque
from itertools import islice

ADC_BITS = 12
ADC_MAX_VALUE = 1 << ADC_BITS
MID = ADC_MAX_VALUE // 2

PRE_AMP_GAIN = 1.5
HEADROOM = 100
RECORD_WEIGHTS = (8, 6, 4, 3, 2, 1)
NOISE_DECAY = 0.995
GATE_RATIO = 1.5
BOOST_LIMIT = 500

PLAYBACK_WEIGHTS = (16, 14, 12, 10, 8, 6, 4, 2)
SUBSTEPS = 4
LOUD_THRESHOLD = 1000
PWM_CENTER = 2047


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class RecordFilter:
    """Pre-amplifies, smooths and noise-gates raw ADC samples.

    State persists between calls, so one instance handles a continuous stream.
    """

    def __init__(self) -> None:
        self._history: deque[int] = deque([0] * len(RECORD_WEIGHTS), maxlen=len(RECORD_WEIGHTS))
        self.noise_floor = MID

    def process(self, sample: int) -> int:
        """Condition one raw 12-bit sample and return the value to store."""
        limit = MID - HEADROOM
        centered = int((sample - MID) * PRE_AMP_GAIN)
        centered = max(-limit, min(limit, centered))
        self._history.append(centered + MID)

        # The oldest entry carries the heaviest weight.
        weighted = sum(weight * value for weight, value in zip(RECORD_WEIGHTS, self._history))
        filtered = weighted // sum(RECORD_WEIGHTS)

        level = abs(filtered - MID)
        if level < self.noise_floor:
            self.noise_floor = int(
                self.noise_floor * NOISE_DECAY + level * (1.0 - NOISE_DECAY)
            )

        if level > self.noise_floor * GATE_RATIO:
            if level < BOOST_LIMIT:
                filtered = MID + (filtered - MID) * 2
        else:
            filtered = MID
        return filtered & 0xFFFF


class PlaybackFilter:
    """Interpolates, smooths and amplifies stored samples into PWM levels."""

    def __init__(self) -> None:
        self._history: deque[int] = deque(
            [0] * len(PLAYBACK_WEIGHTS), maxlen=len(PLAYBACK_WEIGHTS)
        )

    def process(self, current: int, following: int) -> int:
        """Return the PWM level for the current sample, given the one after it."""
        for substep in range(SUBSTEPS):
            self._history.append(
                current + _trunc_div((following - current) * substep, SUBSTEPS)
            )

        # Oldest entry first, then the rest from newest backwards.
        ordered = [self._history[0], *islice(reversed(self._history), len(PLAYBACK_WEIGHTS) - 1)]
        total = sum(weight * (value - MID) for weight, value in zip(PLAYBACK_WEIGHTS, ordered))
        filtered = _trunc_div(total, sum(PLAYBACK_WEIGHTS))

        gain = 1.5 if abs(filtered) > LOUD_THRESHOLD else 2.0
        filtered = int(filtered * gain)
        filtered = max(-PWM_CENTER, min(PWM_CENTER, filtered))
        return filtered + PWM_CENTER