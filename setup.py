from setuptools import find_packages, setup

setup(
    name="linelink",
    version="0.1.0",
    description="linelink - shareable links to exact lines of files in a repository",
    packages=find_packages(include=["linelink", "linelink.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer>=0.9",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linelink=linelink.cli:main",
        ],
    },
)
