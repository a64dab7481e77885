# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirtree",
    version="0.1.0",
    description="Depth-limited, git-aware directory trees with LS_COLORS support",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirtree", "dirtree.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirtree=dirtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
