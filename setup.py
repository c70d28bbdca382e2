"""
QuoteFinder build script.

Usage:
    # Development (editable install):
    pip install -e ".[test]"

    # Run the tests:
    python -m pytest tests

Installs the `quotefinder` command (see quotefinder/cli.py).
"""

from setuptools import setup

APP_NAME = "quotefinder"

PACKAGES = [
    "quotefinder",
    "quotefinder.core",
]

setup(
    name=APP_NAME,
    version="1.0.0",
    description="Find where a phrase is spoken in episode transcripts",
    packages=PACKAGES,
    install_requires=[
        "requests>=2.28.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "quotefinder=quotefinder.cli:main",
        ],
    },
)
