"""Setup configuration for the Creational Patterns package."""
from setuptools import setup, find_packages

setup(
    name="creational-patterns",
    version="1.0.0",
    description="Abstract Factory and Factory Method demonstrations",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pydantic>=2.0",
        "structlog>=23.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
