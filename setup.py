from setuptools import setup, find_packages

setup(
    name="reminder-service",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "pydantic>=2",
        "pydantic-settings",
        "python-dateutil",
        "prometheus-client",
        "prometheus-fastapi-instrumentator",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
