# setup.py
from setuptools import setup, find_packages

setup(
    name="site_reader",
    version="0.1.0",
    description="Breadth-first website crawler that extracts page text for retrieval",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"site_reader.report": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.2",
        "jinja2>=3.1",
        "langchain-text-splitters>=0.2",
        "playwright>=1.40",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.4", "pytest-asyncio>=0.23"],
    },
    entry_points={
        "console_scripts": ["site-reader=site_reader.cli:cli"],
    },
    python_requires=">=3.11",
)
