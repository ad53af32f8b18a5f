"""Setup script for localization-exporter."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read version
version_file = Path(__file__).parent / "localization_exporter" / "__version__.py"
version_info = {}
exec(version_file.read_text(), version_info)

setup(
    name="localization-exporter",
    version=version_info["__version__"],
    author=version_info["__author__"],
    author_email="sezginpak@gmail.com",
    description=version_info["__description__"],
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/sezginpak/localization-exporter",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Localization",
        "Topic :: Software Development :: Internationalization",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pyyaml>=6.0",
        "certifi>=2023.0.0",
        "lxml>=4.5",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "black>=23.0",
            "flake8>=6.0",
            "build>=1.0",
            "twine>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "localization-exporter=localization_exporter.cli:main",
        ],
    },
    keywords="localization i18n ios strings stringsdict poeditor plist cli",
    project_urls={
        "Homepage": "https://github.com/sezginpak/localization-exporter",
        "Repository": "https://github.com/sezginpak/localization-exporter",
        "Bug Tracker": "https://github.com/sezginpak/localization-exporter/issues",
    },
)
