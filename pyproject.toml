[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pic_hmi"
version = "0.1.0"
description = "Operator station toolbar and main window for a substation process-picture HMI"
requires-python = ">=3.10"
keywords = ["hmi", "scada", "toolbar", "substation", "process picture", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Manufacturing",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]
dependencies = [
    "pillow>=9.1",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pic-hmi = "pic_hmi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pic_hmi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
