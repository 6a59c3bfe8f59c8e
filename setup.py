"""
Setup script for cypher2sql package
Install with: pip install -e .
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="cypher2sql",
    version="0.1.0",
    author="Martin Schulze",
    description="Grammar-based translator from Cypher node patterns to SQL statements",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "examples", "docs"]),
    package_data={
        "cypher2sql": ["cypher/grammar.lark"],
    },
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "lark>=1.1.9",
        "sqlglot>=20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "cypher2sql=cypher2sql.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
