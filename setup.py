from setuptools import setup, find_packages

setup(
    name="termstyle",
    version="0.1.0",
    description="Immutable, chainable styling of terminal text into inline markup",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.12",
)
