"""
Handle-style API around MadgwickAHRS.

Every function takes the filter handle returned by init() first and reports
the outcome as an ErrCode. A handle that is not a MadgwickAHRS instance
(None included) yields ErrCode.INVALID_HANDLE and nothing is mutated.
Degenerate sensor data never produces an error, see MadgwickAHRS.
"""

import logging

from .config import MadgwickConfig
from .err_code import ErrCode
from .madgwickahrs import MadgwickAHRS

_LOG = logging.getLogger(__name__)


def _valid(handle, op):
    if isinstance(handle, MadgwickAHRS):
        return True
    _LOG.warning(f"{op}: invalid handle {handle!r}")
    return False


def init() -> MadgwickAHRS:
    """Create a filter at the identity quaternion with beta and sample_freq unset (0.0)."""
    return MadgwickAHRS()


def set_config(handle, config: MadgwickConfig) -> ErrCode:
    """
    Copy beta and sample_freq from config. Values are not range checked.
    A config that is not a MadgwickConfig is rejected like an invalid handle.
    """
    if not _valid(handle, "set_config"):
        return ErrCode.INVALID_HANDLE
    if not isinstance(config, MadgwickConfig):
        _LOG.warning(f"set_config: invalid config {config!r}")
        return ErrCode.INVALID_HANDLE
    handle.set_config(config)
    return ErrCode.SUCCESS


def config(handle) -> ErrCode:
    """Apply the stored configuration. Parameters take effect when set, so this only checks the handle."""
    if not _valid(handle, "config"):
        return ErrCode.INVALID_HANDLE
    return ErrCode.SUCCESS


def set_beta(handle, beta: float) -> ErrCode:
    if not _valid(handle, "set_beta"):
        return ErrCode.INVALID_HANDLE
    handle.set_beta(beta)
    return ErrCode.SUCCESS


def set_sample_frequency(handle, sample_freq: float) -> ErrCode:
    if not _valid(handle, "set_sample_frequency"):
        return ErrCode.INVALID_HANDLE
    handle.set_sample_frequency(sample_freq)
    return ErrCode.SUCCESS


def get_quaternion(handle):
    """
    Read the current estimate.

    Returns:
        (ErrCode.SUCCESS, (q0, q1, q2, q3)) with q0 the scalar part, or
        (ErrCode.INVALID_HANDLE, None)
    """
    if not _valid(handle, "get_quaternion"):
        return ErrCode.INVALID_HANDLE, None
    return ErrCode.SUCCESS, handle.quaternion.as_tuple()


def update_6dof(handle, gx: float, gy: float, gz: float,
                ax: float, ay: float, az: float) -> ErrCode:
    """
    One gyroscope + accelerometer update.
    gx, gy, gz in rad/s; ax, ay, az in any consistent unit.
    """
    if not _valid(handle, "update_6dof"):
        return ErrCode.INVALID_HANDLE
    handle.update_imu((gx, gy, gz), (ax, ay, az))
    return ErrCode.SUCCESS


def update_9dof(handle, gx: float, gy: float, gz: float,
                ax: float, ay: float, az: float,
                mx: float, my: float, mz: float) -> ErrCode:
    """
    One gyroscope + accelerometer + magnetometer update.
    A zero magnetometer reading makes this identical to update_6dof.
    """
    if not _valid(handle, "update_9dof"):
        return ErrCode.INVALID_HANDLE
    handle.update((gx, gy, gz), (ax, ay, az), (mx, my, mz))
    return ErrCode.SUCCESS
