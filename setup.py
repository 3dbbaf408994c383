# setup.py
from setuptools import setup, find_packages

setup(
    name="crisp",
    version="0.3.0",
    description="A small lexically scoped Lisp: reader, evaluator and REPL",
    packages=find_packages(include=["crisp", "crisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["crisp = crisp.cli:main"],
    },
    zip_safe=False,
)
