# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa",
    version="0.1.0",
    description="A small Scheme interpreter: reader, evaluator and primitive library",
    python_requires=">=3.10",
    packages=find_packages(include=["kappa", "kappa.*"]),
    package_data={"kappa": ["prelude/*.scm"]},
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["kappa = kappa.__main__:main"],
    },
    zip_safe=False,
)
