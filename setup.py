# setup.py
from setuptools import setup, find_packages

setup(
    name="schemer",
    version="0.1.0",
    description="A minimal evaluator for a small pure Scheme subset",
    packages=find_packages(include=["schemer", "schemer.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
