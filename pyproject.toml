[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interview_drills"
version = "0.1.0"
description = "Solutions to classic coding-interview drills on arrays, linked lists, two pointers and sliding windows."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "interview", "practice", "arrays", "linked-list", "two-pointers", "sliding-window"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["interview_drills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
