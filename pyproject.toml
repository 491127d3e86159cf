[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warehouse_sim"
version = "0.1.0"
description = "A step-based simulation of a volunteer-run warehouse handling customer orders"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "warehouse", "volunteers", "orders", "interactive"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warehouse = "warehouse_sim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["warehouse_sim"]

[tool.pytest.ini_options]
addopts = "-ra"
