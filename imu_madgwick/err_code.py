"""Result codes returned by the handle API."""

from enum import IntEnum


class ErrCode(IntEnum):
    SUCCESS = 0
    INVALID_HANDLE = 1  # None or not a MadgwickAHRS instance
