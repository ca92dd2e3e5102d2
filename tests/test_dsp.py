import random

import pytest

from picosynth.dsp import MID, PWM_CENTER, PlaybackFilter, RecordFilter


def _silenced_filter() -> RecordFilter:
    record = RecordFilter()
    for _ in range(3000):
        record.process(MID)
    return record


def _steady(record: RecordFilter, value: int, count: int = 12) -> int:
    result = MID
    for _ in range(count):
        result = record.process(value)
    return result


def test_record_constant_midpoint_is_silence():
    record = RecordFilter()
    outputs = [record.process(MID) for _ in range(20)]
    assert outputs == [MID] * 20


def test_record_noise_floor_decays_to_zero_during_silence():
    record = _silenced_filter()
    assert record.noise_floor == 0


def test_record_noise_floor_never_rises():
    record = RecordFilter()
    floors = []
    rng = random.Random(7)
    for _ in range(500):
        record.process(rng.randrange(0, 4096))
        floors.append(record.noise_floor)
    assert all(b <= a for a, b in zip(floors, floors[1:]))


def test_record_small_signal_is_boosted():
    record = _silenced_filter()
    assert _steady(record, 2148) == 2348


def test_record_small_signal_symmetric():
    up = _steady(_silenced_filter(), MID + 100)
    down = _steady(_silenced_filter(), MID - 100)
    assert up - MID == MID - down
    assert up > MID


def test_record_loud_signal_is_clamped():
    record = _silenced_filter()
    assert _steady(record, 4095) == 3996


def test_record_clamp_symmetric():
    high = _steady(_silenced_filter(), 4095)
    low = _steady(_silenced_filter(), 0)
    assert high - MID == MID - low


def test_record_loud_signal_gated_without_silence_first():
    record = RecordFilter()
    outputs = [record.process(4095) for _ in range(30)]
    assert set(outputs) == {MID}


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_record_output_in_adc_range(seed):
    rng = random.Random(seed)
    record = _silenced_filter()
    for _ in range(1000):
        assert 0 <= record.process(rng.randrange(0, 4096)) < 4096


def test_playback_midpoint_gives_pwm_center():
    playback = PlaybackFilter()
    outputs = [playback.process(MID, MID) for _ in range(5)]
    assert outputs[-1] == PWM_CENTER


def test_playback_saturates_high():
    playback = PlaybackFilter()
    for _ in range(5):
        level = playback.process(4095, 4095)
    assert level == 4094
    assert level == 2 * PWM_CENTER


def test_playback_saturates_low():
    playback = PlaybackFilter()
    for _ in range(5):
        level = playback.process(0, 0)
    assert level == 0


def test_playback_symmetric_about_center():
    up, down = PlaybackFilter(), PlaybackFilter()
    for _ in range(5):
        high = up.process(MID + 100, MID + 100)
        low = down.process(MID - 100, MID - 100)
    assert high + low == 2 * PWM_CENTER
    assert high > PWM_CENTER


def test_playback_output_in_pwm_range():
    rng = random.Random(11)
    playback = PlaybackFilter()
    for _ in range(1000):
        level = playback.process(rng.randrange(0, 4096), rng.randrange(0, 4096))
        assert 0 <= level <= 2 * PWM_CENTER