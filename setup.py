import runpy
from pathlib import Path

from setuptools import setup, find_packages

VERSION_FILE = Path(__file__).parent / "src" / "comptrace" / "_version.py"
PIP_VERSION = runpy.run_path(str(VERSION_FILE))["PIP_VERSION"]

setup(
    name="comptrace",
    version=PIP_VERSION,
    description="Component-scoped, level-filtered tracing with a compact runtime/env configuration language",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "comptrace=comptrace.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
