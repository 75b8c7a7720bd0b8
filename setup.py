#!/usr/bin/env python
from setuptools import (
    find_packages,
    setup,
)

extras_require = {
    "dev": [
        "build>=0.9.0",
        "ipython",
        "twine",
        "wheel",
    ],
    "bestchain": [
        "eth-typing>=3.3.0",
        "eth-utils>=2.0.0",
    ],
    "lint": [
        "black>=23",
        "flake8>=6.0.0",
        "isort>=5.10.1",
        "mypy>=1.0.0",
    ],
    "test": [
        "hypothesis>=5,<7",
        "pytest>=7.0.0",
        "pytest-cov>=4.0.0",
        "pytest-timeout>=2.0.0",
        "pytest-xdist>=3.0",
    ],
}


extras_require["dev"] = (
    extras_require["dev"]
    + extras_require["bestchain"]
    + extras_require["lint"]
    + extras_require["test"]
)

install_requires = extras_require["bestchain"]

with open("README.md") as readme_file:
    long_description = readme_file.read()

setup(
    name="py-bestchain",
    version="0.1.0-alpha.1",
    description="Heaviest-chain fork choice over a set of proof-of-work block headers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=install_requires,
    python_requires=">=3.8, <4",
    extras_require=extras_require,
    license="MIT",
    zip_safe=False,
    keywords="blockchain proof-of-work fork-choice headers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"bestchain": ["py.typed"]},
    entry_points={
        "console_scripts": ["bestchain=bestchain.cli:main"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
