# setup.py

from setuptools import setup, find_packages

setup(
    name="rangefold",
    version="0.1.0",
    author="Kushagra Bharti",
    description="Associative range-fold structures generic over algebraic operator capabilities",
    packages=find_packages(exclude=["tests*", "benchmarks*", "examples*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
