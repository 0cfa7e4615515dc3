[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trotterpauli"
version = "1.0.0"
description = "Symbolic Suzuki-Trotter evolution of Pauli-string observables for quantum many-body dynamics"
requires-python = ">=3.10"
dependencies = ["sympy"]
keywords = ["quantum", "pauli", "trotter", "many-body", "symbolic", "heisenberg picture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trotterpauli = "trotterpauli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["trotterpauli"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
