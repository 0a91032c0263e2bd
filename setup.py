from setuptools import setup, find_packages

setup(
    name="evently",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["app"],
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite",
        "pydantic>=2.0",
        "pydantic-settings",
        "python-dotenv",
        "stripe>=8.0",
        "httpx",
    ],
    extras_require={
        "postgres": ["asyncpg"],
        "test": ["pytest", "pytest-asyncio"],
    },
)
