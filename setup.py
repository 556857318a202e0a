"""
Setup script for the POTD generator package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="potd-generator",
    version="0.1.0",
    author="POTD Generator Team",
    author_email="example@example.com",
    description="ARRIS/CommScope password-of-the-day generator",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/potd-generator",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security",
        "Topic :: Utilities",
    ],
    python_requires=">=3.7",
    install_requires=[
        "pycryptodome>=3.10",
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "potd=potd.cli:main",
        ],
    },
)
