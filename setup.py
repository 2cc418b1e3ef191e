#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="utfutils",
    version="0.1.0",
    description="Conversions between UTF-8, UTF-16 and UTF-32 with optional standard-compliance checks",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={
        "utfutils": ["config.json5"],
    },
    python_requires=">=3.10",
    install_requires=[
        "json5",
    ],
    extras_require={
        "dev": ["pytest", "PyYAML", "black", "mypy"],
    },
)
