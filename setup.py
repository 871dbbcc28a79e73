
from setuptools import setup, find_packages

setup(
    name="connect4_minimax",
    version="0.1",
    description="Connect Four with a minimax / alpha-beta computer player",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4-minimax=connect4_minimax.cli:main",
        ],
    },
)
