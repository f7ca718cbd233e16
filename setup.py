from setuptools import find_packages, setup

setup(
    name="svcinit",
    version="0.1.0",
    description="svcinit - install and control a program as an init-system service",
    packages=find_packages(include=["svcinit", "svcinit.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Config and output schemas
        "jinja2",  # Service definition templates
        "typer<0.26",  # CLI (uses the real click package; 0.26+ vendors its own)
        "click",  # CLI context plumbing under Typer
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "svcinit=svcinit.cli:main",
        ],
    },
)
