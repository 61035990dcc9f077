from setuptools import find_packages
from setuptools import setup

setup(
    name="tronkeys",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "ecdsa",
        "pycryptodome",
    ],
    extras_require={
        "dev": [],
        "test": [
            "pytest",
            "bip32",
            "mnemonic",
        ],
    },
    entry_points={
        "console_scripts": ["tronkeys = tronkeys.__main__:main"],
    },
)
