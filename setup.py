#!/usr/bin/env python3
"""
Setup script for the customerror package
"""

from setuptools import setup, find_packages

setup(
    name="customerror",
    version="0.1.0",
    description="Structured, localizable application errors with codes, tags and fields",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 🚀 Web Framework
        "fastapi>=0.104.1",

        # 📋 Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.3",
            "httpx>=0.25.2",
        ],
    },
    package_data={
        "customerror": ["py.typed"],
    },
)
