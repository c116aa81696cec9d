# setup.py
from setuptools import setup, find_packages

core_requirements = [
    "requests>=2.28",
]

test_requirements = [
    "pytest>=7.3",
]

setup(
    name="phrasefinder",
    version="1.0.0",
    description="Client for the PhraseFinder search service over the Google Books Ngram dataset",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=core_requirements,
    extras_require={"test": test_requirements},
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "phrasefinder=phrasefinder.cli:main",
        ],
    },
)
