# setup.py
from setuptools import setup, find_packages

setup(
    name="lumen",
    version="0.1.0",
    description="A small embeddable expression language with lexical closures",
    packages=find_packages(include=["lumen", "lumen.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
