from setuptools import setup, find_packages

setup(
    name="evtx-export",
    version="0.1.0",
    description="Stream Windows event log records to CSV, JSON, JSON-Lines or XML",
    author="Your Name",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "python-evtx>=0.7.4",
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
        "structlog>=23.1",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "evtx-export=evtx_export.cli:app"
        ]
    },
    python_requires=">=3.8",
    include_package_data=True,
)
