# -*- coding: utf-8 -*-
"""
    Copyright (c) 2015 Jonas Böer, jonas.boeer@student.kit.edu

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU Lesser General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU Lesser General Public License for more details.

    You should have received a copy of the GNU Lesser General Public License
    along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""

import logging

import numpy as np
from numpy.linalg import norm

from .config import MadgwickConfig
from .quaternion import Quaternion

_LOG = logging.getLogger(__name__)

# Below this a vector or gradient is treated as zero
_EPS = 1e-12


class MadgwickAHRS:
    """
    Madgwick gradient descent orientation filter (IMU and IMU+Mag).
    - gyro in rad/s
    - accel in any unit (normalized internally)
    - mag in any unit (normalized internally)
    The estimate is a unit quaternion (w, x, y, z), identity until the first update.
    beta and sample_freq stay 0.0 until configured.
    """

    def __init__(self, beta=0.0, sample_freq=0.0, quaternion=None):
        """
        Initialize the class with the given parameters.
        :param beta: Algorithm gain beta
        :param sample_freq: Sample frequency in Hz, the integration step is 1/sample_freq
        :param quaternion: Initial quaternion, identity if None
        """
        self.beta = float(beta)
        self.sample_freq = float(sample_freq)
        self.quaternion = Quaternion(1, 0, 0, 0) if quaternion is None else Quaternion(quaternion)

    def set_config(self, config: MadgwickConfig):
        # Convert both before assigning so a bad record changes nothing
        beta = float(config.beta)
        sample_freq = float(config.sample_freq)
        self.beta, self.sample_freq = beta, sample_freq
        _LOG.info(f"Madgwick config applied: beta={self.beta:.6g} sample_freq={self.sample_freq:.6g} Hz")

    def set_beta(self, beta: float):
        self.beta = float(beta)

    def set_sample_frequency(self, sample_freq: float):
        self.sample_freq = float(sample_freq)

    @property
    def sample_period(self) -> float:
        # An unconfigured filter (sample_freq == 0) does not integrate
        if self.sample_freq == 0.0:
            return 0.0
        return 1.0 / self.sample_freq

    def update(self, gyroscope, accelerometer, magnetometer):
        """
        Perform one update step with data from a AHRS sensor array
        :param gyroscope: A three-element array containing the gyroscope data in radians per second.
        :param accelerometer: A three-element array containing the accelerometer data. Can be any unit since a normalized value is used.
        :param magnetometer: A three-element array containing the magnetometer data. Can be any unit since a normalized value is used.
        :return:
        """
        q = self.quaternion

        gyroscope = np.array(gyroscope, dtype=float).flatten()
        accelerometer = np.array(accelerometer, dtype=float).flatten()
        magnetometer = np.array(magnetometer, dtype=float).flatten()

        # Accel check: no usable gravity reference, integrate gyro only
        a_norm = norm(accelerometer)
        if not np.isfinite(a_norm) or a_norm < _EPS:
            _LOG.debug("accelerometer is zero; integrating gyroscope only")
            self._integrate(gyroscope, None)
            return

        # Mag check: same sample through the IMU path
        m_norm = norm(magnetometer)
        if not np.isfinite(m_norm) or m_norm < _EPS:
            _LOG.debug("magnetometer is zero; falling back to IMU")
            self.update_imu(gyroscope, accelerometer)
            return

        accelerometer = accelerometer / a_norm
        magnetometer = magnetometer / m_norm

        # Reference direction of Earth's magnetic field: measured field rotated
        # into the earth frame, flattened onto the x (horizontal) and z axes
        h = q * (Quaternion(0, magnetometer[0], magnetometer[1], magnetometer[2]) * q.conj())
        b = np.array([0, norm(h[1:3]), 0, h[3]])

        # Gradient descent algorithm corrective step
        f = np.array([
            2*(q[1]*q[3] - q[0]*q[2]) - accelerometer[0],
            2*(q[0]*q[1] + q[2]*q[3]) - accelerometer[1],
            2*(0.5 - q[1]**2 - q[2]**2) - accelerometer[2],
            2*b[1]*(0.5 - q[2]**2 - q[3]**2) + 2*b[3]*(q[1]*q[3] - q[0]*q[2]) - magnetometer[0],
            2*b[1]*(q[1]*q[2] - q[0]*q[3]) + 2*b[3]*(q[0]*q[1] + q[2]*q[3]) - magnetometer[1],
            2*b[1]*(q[0]*q[2] + q[1]*q[3]) + 2*b[3]*(0.5 - q[1]**2 - q[2]**2) - magnetometer[2]
        ])
        j = np.array([
            [-2*q[2],                  2*q[3],                  -2*q[0],                  2*q[1]],
            [2*q[1],                   2*q[0],                  2*q[3],                   2*q[2]],
            [0,                        -4*q[1],                 -4*q[2],                  0],
            [-2*b[3]*q[2],             2*b[3]*q[3],             -4*b[1]*q[2]-2*b[3]*q[0], -4*b[1]*q[3]+2*b[3]*q[1]],
            [-2*b[1]*q[3]+2*b[3]*q[1], 2*b[1]*q[2]+2*b[3]*q[0], 2*b[1]*q[1]+2*b[3]*q[3],  -2*b[1]*q[0]+2*b[3]*q[2]],
            [2*b[1]*q[2],              2*b[1]*q[3]-4*b[3]*q[1], 2*b[1]*q[0]-4*b[3]*q[2],  2*b[1]*q[1]]
        ])

        self._integrate(gyroscope, j.T.dot(f))

    def update_imu(self, gyroscope, accelerometer):
        """
        Perform one update step with data from a IMU sensor array
        :param gyroscope: A three-element array containing the gyroscope data in radians per second.
        :param accelerometer: A three-element array containing the accelerometer data. Can be any unit since a normalized value is used.
        """
        q = self.quaternion

        gyroscope = np.array(gyroscope, dtype=float).flatten()
        accelerometer = np.array(accelerometer, dtype=float).flatten()

        a_norm = norm(accelerometer)
        if not np.isfinite(a_norm) or a_norm < _EPS:
            _LOG.debug("accelerometer is zero; integrating gyroscope only")
            self._integrate(gyroscope, None)
            return
        accelerometer = accelerometer / a_norm

        # Gradient descent algorithm corrective step
        f = np.array([
            2*(q[1]*q[3] - q[0]*q[2]) - accelerometer[0],
            2*(q[0]*q[1] + q[2]*q[3]) - accelerometer[1],
            2*(0.5 - q[1]**2 - q[2]**2) - accelerometer[2]
        ])
        j = np.array([
            [-2*q[2], 2*q[3], -2*q[0], 2*q[1]],
            [2*q[1], 2*q[0], 2*q[3], 2*q[2]],
            [0, -4*q[1], -4*q[2], 0]
        ])

        self._integrate(gyroscope, j.T.dot(f))

    def _integrate(self, gyroscope, step):
        """
        Apply the gyroscope derivative, minus the normalized step scaled by beta
        when a step is given, over one sample period and renormalize.
        """
        q = self.quaternion

        # Rate of change of quaternion from gyroscope
        qdot = (q * Quaternion(0, gyroscope[0], gyroscope[1], gyroscope[2])) * 0.5

        if step is not None:
            step_norm = norm(step)
            if step_norm > _EPS:
                qdot = qdot - Quaternion(step / step_norm) * self.beta
            else:
                _LOG.debug("gradient is zero; skipping correction")

        # Integrate to yield quaternion
        q = q + qdot * self.sample_period

        q_norm = q.norm()
        if not np.isfinite(q_norm) or q_norm < _EPS:
            _LOG.debug("quaternion norm degenerate; keeping previous orientation")
            return
        self.quaternion = q / q_norm

    def quaternion_xyzw(self):
        # ROS uses x,y,z,w
        return (self.quaternion.x, self.quaternion.y, self.quaternion.z, self.quaternion.w)
