from setuptools import setup

setup(
    name="adjgraph",
    version="0.1.0",
    description="Minimal directed graph built on an adjacency list",
    license="MIT",
    packages=["adjgraph"],
    python_requires=">=3.7",
    install_requires=["PyYAML>=5.1"],
    extras_require={"test": ["pytest>=6"]},
    entry_points={"console_scripts": ["adjgraph = adjgraph.cli:main"]},
)
