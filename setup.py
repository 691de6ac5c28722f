# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from setuptools import setup, find_packages

setup(
    name="landscaper-cli",
    version="0.1.0",
    description="Scaffolding tools for Landscaper blueprints",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["landscaper_cli", "landscaper_cli.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "PyYAML>=6.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Programming Language :: Python",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
    ],
    license="MIT",
    entry_points={
        'console_scripts': [
            'landscaper-cli=landscaper_cli.cli:main',
        ],
    },
    python_requires=">=3.10",
)
