#!/usr/bin/env python

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="python-tokenmap",
    version="1.0.0",
    author="Sir Wabbit",
    author_email="wabbit@wabbit.one",
    description="Heterogeneous map with typed identity keys",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["tokenmap"],
    package_data={"tokenmap": ["py.typed"]},
    python_requires=">=3.11",  # typing.Self, typing.assert_type
    install_requires=[],
    extras_require={
        "test": ["pytest", "mypy"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
