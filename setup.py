from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="elo-ranker",
    version="0.1.0",
    author="Tom Doerr",
    author_email="",
    description="Rank items from pairwise comparisons with Elo ratings and DSPy judges",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/tom-doerr/elo_ranker",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "dspy",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
