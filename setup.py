from setuptools import find_packages, setup

setup(
    name="imgvault",
    version="0.1.0",
    description="Image attachment management for markdown vaults: download, convert, relink and clean up",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer>=0.12,<0.26",  # CLI; 0.26+ vendors click, breaking click.get_current_context()
        "click>=8.2",  # Typer's parser; separate stderr in CliRunner
        "rich",  # Terminal formatting
        "PyYAML",  # Front-matter and YAML output
        "aiohttp>=3.9",  # Image downloads
        "Pillow>=10.0",  # Image conversion and compression
        "pytest>=7.0",  # Testing framework
        "pytest-timeout>=2.1",  # Test timeouts
    ],
    entry_points={
        "console_scripts": [
            "imgvault=imgvault.cli:main",
        ],
    },
)
