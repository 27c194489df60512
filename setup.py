import os
from setuptools import setup, find_packages

# Read version from _version.py (exec, not import: package is not installed yet)
version_file = os.path.join(os.path.dirname(__file__), "guifactory", "_version.py")
with open(version_file) as f:
    exec(f.read())

setup(
    name="guifactory",
    version=get_pip_version() if "get_pip_version" in locals() else "0.0.0",
    description="Abstract Factory demonstration building Windows and Mac widget families",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "guifactory=guifactory.cli:main",
        ],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development",
    ],
    python_requires=">=3.8",
)
