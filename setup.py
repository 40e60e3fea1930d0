from setuptools import find_packages, setup

setup(
    name="vbpcheck",
    version="0.1.0",
    description="Structural checker for Visual Basic 6 projects",
    packages=find_packages(include=["vbpcheck", "vbpcheck.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command-line interface
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "vbpcheck=vbpcheck.cli:main",
        ],
    },
)
