# setup.py
from setuptools import setup, find_packages

setup(
    name="isbn_recovery",
    version="0.1.0",
    description="Recover the missing digit of an ISBN-10 via its modular checksum equation",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "isbn-recovery = isbn_recovery.cli:main",
        ],
    },
)
