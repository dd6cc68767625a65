from setuptools import setup, find_packages
import os

setup(
    name="VECtools",
    version="0.1.0",
    author="VECtools developers",
    description="A toolkit (JIT compiled) for fixed-dimension vector algebra",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["VECtools", "VECtools.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        # Core scientific computing dependencies
        "numpy>=1.22.0",
        # JIT compilation
        "numba>=0.56.0",
    ],
    extras_require={
        # Test suite
        "test": [
            "pytest>=7.0",
        ],
        # Complete installation with all optional features
        "all": [
            "numpy>=1.22.0",
            "numba>=0.56.0",
            "pytest>=7.0",
        ],
    },
    # Include package data
    include_package_data=True,
    package_data={
        "VECtools": ["*.txt", "*.md"],
    },
    zip_safe=False,
)
