#!/usr/bin/env python3
"""
Setup script for the portfolio-dashboard package
"""

from setuptools import find_packages, setup

setup(
    name="portfolio-dashboard",
    version="0.1.0",
    description="Real-estate portfolio dashboard backed by a published Google Sheet",
    package_dir={"": "backend"},
    packages=find_packages(where="backend", exclude=["tests", "tests.*", "*.tests", "*.tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 🚀 Web Framework
        "fastapi>=0.104.1",
        "uvicorn[standard]>=0.24.0",
        "httpx>=0.25.2",

        # 📋 Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "portfolio-dashboard=portfolio_bff.main:run",
        ],
    },
)
