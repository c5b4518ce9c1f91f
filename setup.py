"""
Setup script for the Full-Text Search Engine.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

# Read requirements
requirements = []
with open(this_directory / "requirements.txt", "r") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="fulltext-search-engine",
    version="1.0.0",
    author="Rohan Jain",
    author_email="your.email@example.com",
    description="An in-memory full-text search engine with ranked keyword, phrase and wildcard queries",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/fulltext-search-engine",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    py_modules=["main", "config"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Indexing",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "black>=21.0.0",
            "flake8>=3.9.0",
            "mypy>=0.910",
        ],
        "test": [
            "pytest>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fulltext-search=main:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
