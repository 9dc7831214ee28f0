import re
from pathlib import Path
from setuptools import setup, find_packages

HERE = Path(__file__).resolve().parent


def read_readme() -> str:
    readme_path = HERE / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


def read_engine_version() -> str:
    core = (HERE / "configseal" / "core.py").read_text(encoding="utf-8")
    match = re.search(r'^\s*ENGINE_VERSION\s*=\s*"([^"]+)"', core, re.MULTILINE)
    if match is None:
        raise RuntimeError("ENGINE_VERSION not found in configseal/core.py")
    return match.group(1)


setup(
    name="configseal",
    version=read_engine_version(),
    packages=find_packages(include=["configseal", "configseal.*"]),
    install_requires=[
        "cryptography>=41.0.0",
        "psutil>=5.9.0",
    ],
    extras_require={
        "color": ["colorama>=0.4.6"],
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["configseal=configseal.main:main"],
    },
    python_requires=">=3.10",
    description="Device-bound AES-256-CBC storage for desktop JSON configuration",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
