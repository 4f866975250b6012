import logging

import numpy as np
import pytest

from imu_madgwick import imu_madgwick
from imu_madgwick.config import MadgwickConfig
from imu_madgwick.err_code import ErrCode
from imu_madgwick.madgwickahrs import MadgwickAHRS

INVALID_HANDLES = [None, 0, "imu", {"beta": 0.1}, object()]


def _calls(handle):
    """Every handle operation, bound to handle."""
    return [
        lambda: imu_madgwick.set_config(handle, MadgwickConfig(beta=0.5, sample_freq=10.0)),
        lambda: imu_madgwick.set_config(handle, None),
        lambda: imu_madgwick.config(handle),
        lambda: imu_madgwick.set_beta(handle, 0.5),
        lambda: imu_madgwick.set_sample_frequency(handle, 10.0),
        lambda: imu_madgwick.update_6dof(handle, 0.1, 0.2, 0.3, 0.0, 0.0, 1.0),
        lambda: imu_madgwick.update_9dof(handle, 0.1, 0.2, 0.3, 0.0, 0.0, 1.0, 0.6, 0.0, 0.8),
    ]


def test__init_returns_identity_handle():
    handle = imu_madgwick.init()

    assert isinstance(handle, MadgwickAHRS)
    err, q = imu_madgwick.get_quaternion(handle)
    assert err == ErrCode.SUCCESS
    assert q == (1.0, 0.0, 0.0, 0.0)


def test__handles_are_independent():
    h1 = imu_madgwick.init()
    h2 = imu_madgwick.init()
    imu_madgwick.set_config(h1, MadgwickConfig(beta=0.1, sample_freq=100.0))
    imu_madgwick.update_6dof(h1, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0)

    assert h1 is not h2
    assert imu_madgwick.get_quaternion(h2) == (ErrCode.SUCCESS, (1.0, 0.0, 0.0, 0.0))
    assert h2.beta == 0.0


def test__setters_store_values():
    handle = imu_madgwick.init()

    assert imu_madgwick.set_config(handle, MadgwickConfig(beta=0.2, sample_freq=256.0)) == ErrCode.SUCCESS
    assert imu_madgwick.config(handle) == ErrCode.SUCCESS
    assert (handle.beta, handle.sample_freq) == (0.2, 256.0)

    assert imu_madgwick.set_beta(handle, 0.04) == ErrCode.SUCCESS
    assert imu_madgwick.set_sample_frequency(handle, 50.0) == ErrCode.SUCCESS
    assert (handle.beta, handle.sample_freq) == (0.04, 50.0)


def test__set_config_accepts_degenerate_values():
    handle = imu_madgwick.init()

    assert imu_madgwick.set_config(handle, MadgwickConfig(beta=-1.0, sample_freq=0.0)) == ErrCode.SUCCESS
    assert imu_madgwick.update_6dof(handle, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0) == ErrCode.SUCCESS

    err, q = imu_madgwick.get_quaternion(handle)
    assert err == ErrCode.SUCCESS
    assert np.isclose(np.linalg.norm(q), 1.0)


def test__updates_match_object_api():
    rng = np.random.default_rng(42)
    handle = imu_madgwick.init()
    imu_madgwick.set_config(handle, MadgwickConfig(beta=0.1, sample_freq=100.0))
    reference = MadgwickAHRS(beta=0.1, sample_freq=100.0)

    for i in range(50):
        g = rng.normal(size=3)
        a = rng.normal(size=3) + np.array([0.0, 0.0, 9.81])
        m = rng.normal(size=3)
        if i % 2:
            assert imu_madgwick.update_9dof(handle, *g, *a, *m) == ErrCode.SUCCESS
            reference.update(g, a, m)
        else:
            assert imu_madgwick.update_6dof(handle, *g, *a) == ErrCode.SUCCESS
            reference.update_imu(g, a)

    err, q = imu_madgwick.get_quaternion(handle)
    assert err == ErrCode.SUCCESS
    assert np.allclose(q, reference.quaternion.q)
    assert np.linalg.norm(q) == pytest.approx(1.0, abs=1e-9)


def test__nine_dof_with_zero_mag_matches_six_dof():
    h6 = imu_madgwick.init()
    h9 = imu_madgwick.init()
    for h in (h6, h9):
        imu_madgwick.set_config(h, MadgwickConfig(beta=0.3, sample_freq=200.0))

    imu_madgwick.update_6dof(h6, 0.4, -0.1, 0.2, 0.3, -0.2, 0.9)
    imu_madgwick.update_9dof(h9, 0.4, -0.1, 0.2, 0.3, -0.2, 0.9, 0.0, 0.0, 0.0)

    assert imu_madgwick.get_quaternion(h9) == imu_madgwick.get_quaternion(h6)


@pytest.mark.parametrize("handle", INVALID_HANDLES)
def test__invalid_handle_is_reported_by_every_operation(handle):
    for call in _calls(handle):
        assert call() == ErrCode.INVALID_HANDLE

    assert imu_madgwick.get_quaternion(handle) == (ErrCode.INVALID_HANDLE, None)


def test__set_config_rejects_non_config_record():
    handle = imu_madgwick.init()
    imu_madgwick.set_config(handle, MadgwickConfig(beta=0.1, sample_freq=100.0))

    for bad in (None, {"beta": 0.5, "sample_freq": 10.0}, (0.5, 10.0)):
        assert imu_madgwick.set_config(handle, bad) == ErrCode.INVALID_HANDLE

    assert (handle.beta, handle.sample_freq) == (0.1, 100.0)


def test__invalid_handle_leaves_other_filters_untouched():
    handle = imu_madgwick.init()
    imu_madgwick.set_config(handle, MadgwickConfig(beta=0.1, sample_freq=100.0))
    imu_madgwick.update_6dof(handle, 0.2, -0.1, 0.4, 0.1, 0.0, 1.0)
    before = (handle.quaternion.as_tuple(), handle.beta, handle.sample_freq)

    for invalid in INVALID_HANDLES:
        for call in _calls(invalid):
            call()
        imu_madgwick.get_quaternion(invalid)

    assert (handle.quaternion.as_tuple(), handle.beta, handle.sample_freq) == before


def test__invalid_handle_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="imu_madgwick.imu_madgwick"):
        imu_madgwick.set_beta(None, 0.1)

    assert any("set_beta: invalid handle" in r.getMessage() for r in caplog.records)
