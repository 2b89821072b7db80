# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tree2fs",
    version="1.0.0",
    description="Recreate a directory structure from a 'tree'-style text listing",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["tree2fs*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'tree2fs=tree2fs.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
