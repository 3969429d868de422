[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dvdrental"
version = "0.1.0"
description = "SQLAlchemy models and repositories for a DVD rental database"
requires-python = ">=3.10"
keywords = ["dvdrental", "sqlalchemy", "repository", "database", "orm", "soft-delete"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "sqlalchemy>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["dvdrental"]

[tool.pytest.ini_options]
addopts = "-ra"
