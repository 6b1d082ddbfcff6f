from setuptools import setup, find_packages

setup(
    name="itemctl",
    version="0.1.0",
    description="Command-line tool for managing items stored in a JSON file",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
        "tomli>=2.0",
        "tomli-w>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "itemctl=itemctl.cli:cli",
        ],
    },
)
