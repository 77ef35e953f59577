"""
Setup script for the pdf2hash package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pdf2hash",
    version="0.1.0",
    description="Extract password hashes from encrypted PDFs for John the Ripper and hashcat",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security",
        "Topic :: Utilities",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pypdf>=3.9.0",
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pikepdf>=8.0.0,<10",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdf2hash=pdf2hash.cli:main",
        ],
    },
)
