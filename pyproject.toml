[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mushroom_eda"
version = "0.1.0"
description = "Exploratory data analysis of a mushroom dataset: a JSON API server, chart figure builders, routes and page descriptions"
requires-python = ">=3.10"
keywords = ["eda", "mushroom", "dataset", "histogram", "regression", "plotly", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "flask",
    "numpy",
    "pandas",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
mushroom-eda = "mushroom_eda.server:main"

[tool.hatch.build.targets.wheel]
packages = ["mushroom_eda"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
