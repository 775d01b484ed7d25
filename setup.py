# setup.py
from setuptools import setup, find_packages

setup(
    name="truffula",
    version="0.1.0",
    description="Print a directory tree with depth-cycling terminal colors",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'truffula=truffula.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
