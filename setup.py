"""Setup script for the project."""

from setuptools import setup, find_packages

setup(
    name="fitpulse-api",
    version="1.0.0",
    description="FitPulse fitness tracking API and Python client",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "PyJWT>=2.8",
        "bcrypt>=4.1",
        "httpx>=0.27",
        "langchain-core>=0.2",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    python_requires=">=3.10",
)
