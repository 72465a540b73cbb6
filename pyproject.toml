[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vmclassify"
version = "0.1.0"
description = "Kernel-based SVM and RVM classifiers with probabilistic output and training example management"
requires-python = ">=3.10"
keywords = ["svm", "rvm", "classification", "kernel methods", "logistic calibration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
    "scipy",
]

[tool.hatch.build.targets.wheel]
packages = ["vmclassify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
