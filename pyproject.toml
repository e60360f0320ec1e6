[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphkernels"
version = "0.1.0"
description = "Small numerical kernels: in-place Cholesky factorisation and triangle counting on CSR graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["cholesky", "triangle counting", "csr", "sparse graph", "benchmark"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphkernels-cholesky = "graphkernels.cholesky:main"
graphkernels-triangles = "graphkernels.triangles:main"

[tool.hatch.build.targets.wheel]
packages = ["graphkernels"]

[tool.pytest.ini_options]
addopts = "-ra"
