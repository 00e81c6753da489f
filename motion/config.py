"""
Motion configuration for the SensorTag TicTacToe controller.
Settings for turning accelerometer samples into shake events.
"""


class MotionConfig:
    """
    Configuration class for shake detection.
    Tune these if shakes are missed or fire too easily.
    """

    # ==================== HIGH-PASS FILTER ====================
    # Time constant of the high-pass filter, in milliseconds.
    # Larger values let slower movements through; gravity is always removed.
    FILTER_TAU_MS = 100

    # ==================== SHAKE DETECTION ====================
    # Minimum magnitude of the filtered acceleration (in g) that counts
    # as a shake.
    SHAKE_THRESHOLD_G = 0.8

    # After a shake, ignore the accelerometer for this long (milliseconds)
    # so that one physical shake produces one event.
    EVENT_COOLDOWN_MS = 1000

    # ==================== SENSOR ====================
    # Accelerometer period the sensor is configured with (milliseconds)
    DEFAULT_SAMPLE_PERIOD_MS = 100
