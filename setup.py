from setuptools import setup, find_packages

setup(
    name="campus-timetable",
    version="0.1.0",
    description="Records service for users, courses, instructors, classrooms and timetables",
    packages=find_packages(where="src") + ["cli"],  # 指定在 src 目录下查找包
    package_dir={"": "src", "cli": "cli"},          # 告诉 setuptools 包的根目录是 src
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "SQLAlchemy[asyncio]>=2.0",
        "aiosqlite>=0.19",
        "bcrypt>=4.0",
        "python-dotenv>=1.0",
        "httpx>=0.26",
        "typer>=0.9",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "timetable=cli.main:main",
        ],
    },
)
