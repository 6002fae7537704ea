from setuptools import find_packages, setup

setup(
    name="rangelink",
    version="0.1.0",
    description="RangeLink - portable links to code ranges (format, parse, detect)",
    author="William Wieselquist",
    packages=find_packages(include=["rangelink", "rangelink.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
    },
    entry_points={
        "console_scripts": [
            "rangelink=rangelink.cli:main",
        ],
    },
)
