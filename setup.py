from setuptools import find_packages, setup

setup(
    name="navcheck",
    version="0.1.0",
    description="Navigation and link-integrity validation for markdown documentation corpora",
    packages=find_packages(include=["navcheck", "navcheck.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12",  # CLI
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # YAML output for --display yaml
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "navcheck=navcheck.cli:main",
            "validate-navigation=navcheck.cli:validate_navigation",
        ],
    },
)
