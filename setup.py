"""
Setup script for the PDF Brute-Forcer package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pdf-bruteforce",
    version="0.1.0",
    author="PDF Brute-Forcer Team",
    author_email="example@example.com",
    description="Exhaustive password recovery for encrypted PDF files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/pdf-bruteforce",
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
        "pikepdf>=2.0.0",
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "pdf-bruteforce=pdf_bruteforce.cli:main",
        ],
    },
)
