# setup.py

from setuptools import find_packages, setup

setup(
    name="qukit",
    version="0.1.0",
    description="Python bindings for the qukit quantum amplitude-simulation engine",
    long_description=(
        "This package provides the Python gate API for the qukit native engine. "
        "The per-gate functions are generated from a gate catalog by qukit.bindgen."
    ),
    packages=find_packages(include=["qukit", "qukit.*"]),
    py_modules=["qukit_cli"],
    entry_points={
        "console_scripts": [
            "qukit=qukit_cli:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
