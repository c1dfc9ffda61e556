#!/usr/bin/env python3
"""
exprcalc - extensible arithmetic expression evaluator
Evaluates infix expressions over long-double numbers with run-time
registration of operators, functions and constants.
"""

from setuptools import setup, find_packages
import os
import re
import sys

# Ensure Python 3.8+
if sys.version_info < (3, 8):
    raise RuntimeError("exprcalc requires Python 3.8 or later")

# Read version from __init__.py
here = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(here, "exprcalc", "__init__.py")
version = {}
if os.path.exists(version_file):
    # Parsed, not executed: __init__.py uses package-relative imports
    with open(version_file) as f:
        found = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", f.read(), re.M)
    version["__version__"] = found.group(1) if found else "0.1.0"
else:
    version["__version__"] = "0.1.0"

# Read README
readme_file = os.path.join(here, "README.md")
with open(readme_file, "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="exprcalc",
    version=version.get("__version__", "0.1.0"),
    description="An extensible arithmetic expression evaluator with precedence climbing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="xwest",
    author_email="dev@exprcalc.org",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
        "scipy>=1.10.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Interpreters",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=[
        "calculator", "expression", "parser", "precedence-climbing",
        "arithmetic", "mathematical-computing"
    ],
    zip_safe=False,
    platforms=["Windows", "Linux", "macOS"],
)
