from setuptools import setup, find_packages

setup(
    name="mentorconnect",
    version="0.1",
    python_requires=">=3.11",
    packages=find_packages(exclude=["tests", "tests.*", "alembic"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        "bcrypt<4.1",  # passlib reads bcrypt.__about__, removed in 4.1
        "python-multipart",
        "pydantic[email]",
        "pydantic-settings",
        "python-dotenv",
        "alembic"
    ],
    extras_require={
        "test": ["pytest"],
    },
)
