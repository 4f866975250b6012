"""Madgwick AHRS orientation filter."""

from .config import DEFAULT_BETA, DEFAULT_SAMPLE_FREQ, MadgwickConfig
from .err_code import ErrCode
from .madgwickahrs import MadgwickAHRS
from .quaternion import Quaternion

__all__ = [
    "DEFAULT_BETA",
    "DEFAULT_SAMPLE_FREQ",
    "ErrCode",
    "MadgwickAHRS",
    "MadgwickConfig",
    "Quaternion",
]
