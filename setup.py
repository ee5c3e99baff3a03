# setup.py
from setuptools import setup, find_packages

setup(
    name="synan",
    version="0.1.0",
    description="Analyze-then-execute evaluator for a small statement/expression language",
    packages=find_packages(include=["synan", "synan.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
