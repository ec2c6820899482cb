[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ansiblesummary"
version = "0.1.0"
description = "Summarize the JSON output of ansible-playbook runs per host and task"
requires-python = ">=3.10"
dependencies = []
keywords = ["ansible", "playbook", "summary", "report", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ansible-summary = "ansiblesummary.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ansiblesummary"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
