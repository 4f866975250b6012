from setuptools import setup

"""
Setup file for the imu_madgwick package.

Note: the numpy quaternion and filter code builds on madgwick_py:

- https://github.com/morgil/madgwick_py      (LGPL-3.0, Jonas Böer)

"""

package_name = "imu_madgwick"

setup(
    name=package_name,
    version="0.0.1",
    packages=[package_name],
    python_requires=">=3.8",
    install_requires=[
        "setuptools",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=True,
    description="Madgwick AHRS orientation filter (6-axis and 9-axis)",
    license="LGPL-3.0",
)
