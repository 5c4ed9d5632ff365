"""Setup script for couchette."""

from pathlib import Path

from setuptools import find_packages, setup


def read_version():
    """Read __version__ from the package without importing it."""
    init = Path(__file__).parent / "couchette" / "__init__.py"
    for line in init.read_text().splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("\"'")
    raise RuntimeError("Unable to find __version__ in couchette/__init__.py")


setup(
    name="couchette",
    version=read_version(),
    description="Administration client for CouchDB-compatible document databases",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
)
