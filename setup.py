from setuptools import setup, find_packages

setup(
    name="pypafr",
    version="1.0.0",
    description="Read pairwise genomic alignments in PAF format into pandas-backed tables",
    packages=find_packages(include=["pypafr", "pypafr.*"]),
    install_requires=[
        "pandas",
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'pypafr=pypafr.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
)
