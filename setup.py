from setuptools import setup, find_packages

setup(
    name="sql-repository",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "sqlalchemy>=2.0,<2.1",
        "fastapi",
        "psycopg2-binary",
        "pydantic",
        "pydantic-settings",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
            "pytest-cov",
        ],
    },
)
