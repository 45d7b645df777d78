from setuptools import setup, find_packages

setup(
    name="rfcdoctool",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.5.2",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "hypothesis>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rfcdoctool=rfcdoctool.cli:main",
        ],
    },
    python_requires=">=3.8",
)
