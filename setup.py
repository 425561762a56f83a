#!/usr/bin/env python3
"""
bareos-mcp Setup Script

Installs the bareos_mcp package and the ``bareos-mcp`` command-line tool.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

requirements = [
    "click>=8.2.0",
    "rich>=13.0.0",
    "pydantic>=2.0.0",
    "pydantic-settings>=2.0.0",
    "python-dotenv>=1.0.0",
]

setup(
    name="bareos-mcp",
    version="0.1.0",
    description="Bareos console queries exposed as MCP tools over line-delimited JSON-RPC",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["bareos_mcp", "bareos_mcp.*"]),
    include_package_data=True,
    install_requires=requirements,
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "bareos-mcp=bareos_mcp.cli:cli",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Archiving :: Backup",
    ],
    keywords="bareos, backup, bconsole, mcp, json-rpc",
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=1.0.0",
        ],
    },
)
