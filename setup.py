# setup.py
from setuptools import setup, find_packages

setup(
    name="adhoc",
    version="0.1.0",
    description="Protocols (ad-hoc polymorphism) for a Lisp-style value runtime",
    packages=find_packages(include=["adhoc", "adhoc.*"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
