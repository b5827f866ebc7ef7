# setup.py
from setuptools import setup, find_packages

setup(
    name="scm",
    version="0.1.0",
    description="A minimal Scheme-like interpreter",
    packages=find_packages(include=["scm", "scm.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["scm=scm.repl:main"],
    },
    zip_safe=False,
)
