from setuptools import find_packages, setup

setup(
    name="permengine",
    version="0.1.0",
    packages=find_packages(include=["permengine", "permengine.*"]),
    python_requires=">=3.12",
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["permengine = permengine.cli:main"]
    },
)
