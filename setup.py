from setuptools import setup, find_packages

setup(
    name="connect-four-rules",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect-four=connect_four.interfaces.cli:main",
        ],
    },
)
