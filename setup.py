# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sitecrafter",
    version="1.0.0",
    description="Builds a project tree from generated build actions and projects it into a sandbox mount descriptor",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sitecrafter", "sitecrafter.*"]),
    package_data={
        "sitecrafter.interface.locales": ["*.json"],
    },
    python_requires=">=3.9",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'sitecrafter=sitecrafter.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
