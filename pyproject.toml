[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "philo"
version = "0.1.0"
description = "Dining philosophers simulation with threads, plus small text, formatting and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["dining-philosophers", "threads", "concurrency", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
philo = "philo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["philo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
