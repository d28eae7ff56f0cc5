# setup.py
from setuptools import setup, find_packages

setup(
    name="elbuilder",
    version="0.1.0",
    description="Static-site assembler: inlines <el-component> fragments and wraps pages in <el-layout> templates",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # elbuilder and its subpackages
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'elbuilder=elbuilder.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
