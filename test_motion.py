"""
Tests for the high-pass filter, shake detector and button edges.
"""

import numpy as np
import pytest

from motion.buttons import Button, ButtonEdgeDetector, ButtonPressed
from motion.config import MotionConfig
from motion.detector import MotionEventDetector
from motion.high_pass import HighPassFilter, high_pass_coefficient
from motion.shake_detector import ShakeDetector

GRAVITY = (0.0, 0.0, 1.0)
# Jump from rest: filtered to 0.5 * (1.5, 1.5, 0), norm ~1.06g at 100ms
SPIKE = (1.5, 1.5, 1.0)


# ==================== FILTER ====================

def test_coefficient():
    assert high_pass_coefficient(100, 100) == pytest.approx(0.5)
    assert high_pass_coefficient(100, 25) == pytest.approx(0.8)

    with pytest.raises(ValueError):
        high_pass_coefficient(100, 0)


def test_first_sample_outputs_zero():
    hp = HighPassFilter()

    out = hp.apply(100, (0.3, -0.2, 1.0))

    np.testing.assert_allclose(out, [0.0, 0.0, 0.0])
    np.testing.assert_allclose(hp.last_input, [0.3, -0.2, 1.0])


def test_constant_signal_stays_at_zero():
    hp = HighPassFilter()

    for _ in range(100):
        out = hp.apply(100, GRAVITY)

    np.testing.assert_allclose(out, [0.0, 0.0, 0.0])


def test_filter_step_response():
    hp = HighPassFilter(tau_ms=100)
    hp.apply(100, (0, 0, 0))

    first = hp.apply(100, (1, 0, 0))
    second = hp.apply(100, (1, 0, 0))
    third = hp.apply(100, (1, 0, 0))

    np.testing.assert_allclose(first, [0.5, 0, 0])
    np.testing.assert_allclose(second, [0.25, 0, 0])
    np.testing.assert_allclose(third, [0.125, 0, 0])


def test_filter_uses_current_period():
    hp = HighPassFilter(tau_ms=100)
    hp.apply(100, (0, 0, 0))

    out = hp.apply(300, (0, 2, 0))

    np.testing.assert_allclose(out, [0, 0.5, 0])


def test_filter_rejects_bad_shape():
    with pytest.raises(ValueError):
        HighPassFilter().apply(100, (1.0, 2.0))


def test_filter_reset():
    hp = HighPassFilter()
    hp.apply(100, (0, 0, 0))
    hp.apply(100, (5, 5, 5))

    hp.reset()

    np.testing.assert_allclose(hp.apply(100, (5, 5, 5)), [0, 0, 0])


# ==================== SHAKES ====================

def test_no_shake_at_rest():
    detector = ShakeDetector()

    events = [detector.on_sample(100, *GRAVITY) for _ in range(50)]

    assert events == [None] * 50
    assert not detector.in_cooldown


def test_spike_fires_one_shake():
    detector = ShakeDetector()
    detector.on_sample(100, *GRAVITY)

    event = detector.on_sample(100, *SPIKE)

    assert event is not None
    assert event.magnitude == pytest.approx(np.hypot(0.75, 0.75))
    assert event.filtered == pytest.approx((0.75, 0.75, 0.0))
    assert detector.in_cooldown
    assert detector.cooldown_elapsed_ms == 0


def test_very_first_sample_never_fires():
    # The first sample primes the filter, so its output is zero
    detector = ShakeDetector()

    assert detector.on_sample(100, 5.0, 5.0, 5.0) is None


def test_cooldown_blocks_until_window_elapsed():
    detector = ShakeDetector()
    detector.on_sample(100, *GRAVITY)
    assert detector.on_sample(100, *SPIKE) is not None

    # Keep shaking hard: every filtered sample is well above 0.8g, but
    # ten 100ms cooldown samples must pass before the next shake.
    violent = (3.0, 3.0, 1.0)
    fired = []
    for i in range(10):
        sample = violent if i % 2 == 0 else GRAVITY
        fired.append(detector.on_sample(100, *sample))
        magnitude = np.linalg.norm(detector.filter.last_output)
        assert magnitude > MotionConfig.SHAKE_THRESHOLD_G

    assert fired == [None] * 10
    assert detector.cooldown_elapsed_ms == 1000
    assert not detector.in_cooldown

    # Eligible again: the very next big sample fires
    assert detector.on_sample(100, *violent) is not None
    assert detector.cooldown_elapsed_ms == 0


def test_cooldown_counts_sample_time():
    detector = ShakeDetector()
    detector.on_sample(250, *GRAVITY)
    # k = 100 / 350, so a bigger jump is needed to cross 0.8g
    assert detector.on_sample(250, 3.0, 3.0, 1.0) is not None

    for expected in (250, 500, 750, 1000):
        detector.on_sample(250, *GRAVITY)
        assert detector.cooldown_elapsed_ms == expected


def test_custom_threshold():
    class Sensitive(MotionConfig):
        SHAKE_THRESHOLD_G = 0.1

    detector = ShakeDetector(Sensitive())
    detector.on_sample(100, *GRAVITY)

    assert detector.on_sample(100, 0.3, 0.0, 1.0) is not None


def test_shake_detector_reset():
    detector = ShakeDetector()
    detector.on_sample(100, *GRAVITY)
    detector.on_sample(100, *SPIKE)

    detector.reset()

    assert not detector.in_cooldown
    assert detector.filter.last_input is None


# ==================== BUTTONS ====================

def test_rising_edge_only():
    buttons = ButtonEdgeDetector()

    results = [buttons.on_button_state(left, False) for left in (False, False, True, True, False)]

    assert results == [[], [], [ButtonPressed(Button.LEFT)], [], []]


def test_both_buttons_same_update():
    buttons = ButtonEdgeDetector()

    assert buttons.on_button_state(True, True) == [
        ButtonPressed(Button.LEFT),
        ButtonPressed(Button.RIGHT),
    ]
    assert buttons.on_button_state(True, True) == []
    assert buttons.on_button_state(False, True) == []
    assert buttons.on_button_state(True, True) == [ButtonPressed(Button.LEFT)]


def test_buttons_are_independent():
    buttons = ButtonEdgeDetector()
    buttons.on_button_state(True, False)

    assert buttons.on_button_state(True, True) == [ButtonPressed(Button.RIGHT)]
    assert buttons.is_pressed(Button.LEFT)


# ==================== COMBINED ====================

def test_motion_event_detector_listeners():
    detector = MotionEventDetector()
    shakes, presses = [], []
    detector.add_listener(on_shake=shakes.append, on_button=presses.append)

    detector.on_sample(100, *GRAVITY)
    event = detector.on_sample(100, *SPIKE)
    detector.on_button_state(False, True)

    assert shakes == [event]
    assert presses == [ButtonPressed(Button.RIGHT)]


def test_motion_event_detector_reset():
    detector = MotionEventDetector()
    detector.on_button_state(True, False)
    detector.on_sample(100, *GRAVITY)
    detector.on_sample(100, *SPIKE)

    detector.reset()

    assert not detector.shakes.in_cooldown
    assert detector.on_button_state(True, False) == [ButtonPressed(Button.LEFT)]
