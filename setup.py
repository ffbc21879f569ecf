from pathlib import Path

import setuptools

this_directory = Path(__file__).parent
long_description = (this_directory / "README.rst").read_text()

test_dependencies = ["pytest"]


setuptools.setup(
    name="clusterpack",
    version="1.0.0",
    description="Grid layout of hierarchical circle packings.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=["clusterpack"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Operating System :: Unix",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    keywords="circle packing layout hierarchy visualization grid",
    python_requires=">=3.8",
    install_requires=[
        "scipy",
        "numpy>=1.18",
        "tqdm",
        "typer",
        "pandas",
        "matplotlib",
    ],
    test_suite="pytest",
    tests_require=test_dependencies,
    extras_require={"test": test_dependencies},
    entry_points={"console_scripts": ["clusterpack=clusterpack.cli:app"]},
)
