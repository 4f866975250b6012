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

import numbers

import numpy as np
from numpy.linalg import norm


class Quaternion:
    """
    A simple class implementing basic quaternion arithmetic.
    Components are stored as a numpy array self.q = [w, x, y, z]
    """
    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, w_or_q, x=None, y=None, z=None):
        """
        Initializes a Quaternion object
        :param w_or_q: A scalar representing the real part of the quaternion, another Quaternion
                       or a 4-element array containing the quaternion values
        :param x: The first imaginary part if w_or_q is a scalar
        :param y: The second imaginary part if w_or_q is a scalar
        :param z: The third imaginary part if w_or_q is a scalar
        """
        if x is not None and y is not None and z is not None:
            self._q = np.array([w_or_q, x, y, z], dtype=float)
        elif isinstance(w_or_q, Quaternion):
            self._q = np.array(w_or_q.q, dtype=float)
        else:
            q = np.array(w_or_q, dtype=float).flatten()
            if q.shape != (4,):
                raise ValueError(f"Expecting a 4-element array or w x y z as parameters, got shape {q.shape}")
            self._q = q

    def conj(self):
        """
        Returns the conjugate of the quaternion
        :rtype : Quaternion
        :return: the conjugate of the quaternion
        """
        return Quaternion(self._q[0], -self._q[1], -self._q[2], -self._q[3])

    def norm(self):
        return float(norm(self._q))

    def normalized(self):
        return Quaternion(self._q / norm(self._q))

    def as_tuple(self):
        # (w, x, y, z) as plain floats
        return tuple(float(v) for v in self._q)

    def __mul__(self, other):
        """
        multiply the given quaternion with another quaternion or a scalar
        :param other: a Quaternion object or a number
        :return:
        """
        if isinstance(other, Quaternion):
            w = self._q[0]*other._q[0] - self._q[1]*other._q[1] - self._q[2]*other._q[2] - self._q[3]*other._q[3]
            x = self._q[0]*other._q[1] + self._q[1]*other._q[0] + self._q[2]*other._q[3] - self._q[3]*other._q[2]
            y = self._q[0]*other._q[2] - self._q[1]*other._q[3] + self._q[2]*other._q[0] + self._q[3]*other._q[1]
            z = self._q[0]*other._q[3] + self._q[1]*other._q[2] - self._q[2]*other._q[1] + self._q[3]*other._q[0]

            return Quaternion(w, x, y, z)
        elif isinstance(other, numbers.Number):
            return Quaternion(self._q * other)

        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return Quaternion(self._q * other)
        return NotImplemented

    def __add__(self, other):
        """
        add two quaternions element-wise
        :param other: a Quaternion object
        :return:
        """
        if isinstance(other, Quaternion):
            return Quaternion(self._q + other._q)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Quaternion):
            return Quaternion(self._q - other._q)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Number):
            return Quaternion(self._q / other)
        return NotImplemented

    # Implementing other interfaces to ease working with the class

    @property
    def q(self):
        return self._q

    @property
    def w(self):
        return float(self._q[0])

    @property
    def x(self):
        return float(self._q[1])

    @property
    def y(self):
        return float(self._q[2])

    @property
    def z(self):
        return float(self._q[3])

    def __getitem__(self, item):
        return self._q[item]

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return np.array(self._q)
        return np.array(self._q, dtype=dtype)

    def __repr__(self):
        return f"Quaternion({self._q[0]:.6g}, {self._q[1]:.6g}, {self._q[2]:.6g}, {self._q[3]:.6g})"
