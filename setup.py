from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="elo-list",
    version="0.1.0",
    author="",
    author_email="",
    description="A ranked list maintained through pairwise Elo comparisons",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["elo_list", "elo_list.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "dspy",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
