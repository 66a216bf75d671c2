[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cinema-tickets"
version = "0.1.0"
description = "Keep a cinema's ticket book in plain text files: add, edit, remove and search tickets, and list free seats for a showtime."
requires-python = ">=3.10"
keywords = ["cinema", "tickets", "booking", "seats", "showtimes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cinema-tickets = "cinema_tickets.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cinema_tickets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
