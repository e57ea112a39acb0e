import os

from setuptools import find_packages, setup

setup(
    name="ryu-schema",
    version="0.1.0",
    packages=find_packages(include=["ryu", "ryu.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "tests": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="Ryu Contributors",
    description="Composable runtime schemas with path-qualified validation errors",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
