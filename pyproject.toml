[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "0.1.0"
description = "Small programming drills: text scroller, big factorials, dice race, multiplication tables, bit shifts, shape lookup and array exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "education", "factorial", "dice", "multiplication-table", "drills"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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

[project.scripts]
drillbook-scroller = "drillbook.scroller:main"
drillbook-factorial = "drillbook.factorial:main"
drillbook-dice = "drillbook.dice:main"
drillbook-mtable = "drillbook.mtable:main"
drillbook-bitshift = "drillbook.bitshift:main"
drillbook-shapes = "drillbook.shapes:main"
drillbook-arrays = "drillbook.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
