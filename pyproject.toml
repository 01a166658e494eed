[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liftsim"
version = "0.1.0"
description = "Threaded elevator and dining-philosophers simulations built on a small task/semaphore/mailbox kernel"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "elevator", "concurrency", "semaphore", "mailbox", "dining-philosophers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
liftsim = "liftsim.simulation:main"
liftsim-philosophers = "liftsim.philosophers:main"

[tool.hatch.build.targets.wheel]
packages = ["liftsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
