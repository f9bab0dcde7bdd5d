"""Setup configuration for UrbanFood Catalog package."""

from setuptools import setup, find_namespace_packages

setup(
    name="urbanfood-catalog",
    version="1.0.0",
    description="UrbanFood product catalog: filtering, sorting, pagination and REST API",
    author="UrbanFood",
    author_email="",
    packages=find_namespace_packages(include=["api*", "config*", "src*", "scripts*"]),
    python_requires=">=3.11",
    install_requires=[
        "duckdb>=1.0.0",
        "requests>=2.31.0",
        "httpx>=0.26.0",
        "python-dotenv>=1.0.0",
        "tenacity>=8.2.0",
        "fastapi>=0.110.0",
        "pydantic>=2.6.0",
        "pydantic-settings>=2.2.0",
        "uvicorn>=0.27.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "urbanfood-init-db=scripts.init_db:main",
            "urbanfood-browse=scripts.browse_catalog:main",
        ],
    },
)
