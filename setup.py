import os

from setuptools import find_packages, setup

setup(
    name="railcheck",
    version="0.1.0",
    packages=find_packages(include=["railcheck", "railcheck.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    author="railcheck Contributors",
    description="Composable, path-aware validators with Pydantic interop",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
