from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("pitchz", "./pitchz/__init__.py")
pitchz = ModuleType(loader.name)
loader.exec_module(pitchz)

setup(
    name="pitchz",
    version=pitchz.__version__,  # type: ignore
    description="Tool to parse and check GitPitch markdown decks.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={"console_scripts": ["pitchz=pitchz.cli:main"]},
    install_requires=[
        "appdirs",
        "pydantic>=2",
        "PyYAML",
        "rich",
        "typer",
        "typing_extensions",
        "watchfiles",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
    ],
)
