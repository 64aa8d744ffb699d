from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="lastresort",
    version="1.0.0",
    packages=find_packages(include=["lastresort", "lastresort.*"]),
    package_data={"lastresort": ["wordlists/*.txt"]},
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["lastresort=lastresort.main:main"],
    },
    python_requires=">=3.10",
    description="Transcode binary data to and from PGP / EFF word lists",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
