"""
Setup script for Object Tracker
"""

from setuptools import setup, find_packages

setup(
    name="object-tracker",
    version="1.0.0",
    description="Bounding-box position tracking with per-axis Kalman filters",
    author="Object Tracker Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
        "scipy>=1.5.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
            "filterpy>=1.4.5",
        ],
    },
    entry_points={
        "console_scripts": [
            "object-tracker=object_tracker.main:main",
        ],
    },
)
