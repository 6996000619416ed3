# setup.py

from setuptools import setup, find_packages

setup(
    name="tour_insertion",
    version="0.1.0",
    description="Nearest-neighbour and smallest-increase insertion heuristics for planar TSP tours",
    packages=find_packages(exclude=["tests*", "examples*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pygame",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
