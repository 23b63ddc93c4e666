# setup.py
from setuptools import setup, find_packages

setup(
    name="sigma",
    version="0.1.0",
    description="Fused reader/evaluator for a small S-expression language",
    packages=find_packages(include=["sigma", "sigma.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
