from setuptools import setup, find_namespace_packages

setup(
    name="strmatch",
    version="0.1.0",
    description="Substring search engine with interchangeable, cross-validated algorithm implementations",
    packages=find_namespace_packages(include=["strmatch", "strmatch.*"]),
    package_data={
        "strmatch.config": ["strmatch.conf", "samples/*.txt"],
    },
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3",
        "matplotlib>=3.4",
        "psutil>=5.8",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "strmatch-bench=strmatch.benchmarks.run_benchmarks:main",
        ],
    },
)
