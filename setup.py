"""
Setup script for the classroom-rounds package.

The game engine, registry and store live under src/classroom_rounds;
the bundled question bank and memory catalog ship as package data.
"""

from setuptools import setup, find_packages

setup(
    name="classroom-rounds",
    version="1.0.0",
    description="Classroom Rounds - two-player mini-games with a shared class scoreboard",
    author="Course Staff",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    package_data={
        "classroom_rounds._content": ["data/*.json"],
        "classroom_rounds._store": ["schema.sql"],
    },
    entry_points={
        "console_scripts": [
            "classroom-rounds=classroom_rounds.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
