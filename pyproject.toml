[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "treebench"
version = "0.1.0"
description = "Classic data structures in plain Python: search trees, heaps, union-find, hash tables, Kruskal's MST and fixed-size binary records, with small benchmarks."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "binary search tree",
    "avl",
    "splay tree",
    "dsw",
    "binomial heap",
    "union-find",
    "hash table",
    "kruskal",
    "minimum spanning tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treebench-array = "treebench.array_list:main"
treebench-hash = "treebench.hash_table:main"
treebench-mst = "treebench.mst:main"
treebench-genebank = "treebench.gene_bank:main"

[tool.setuptools.packages.find]
include = ["treebench*"]

[tool.pytest.ini_options]
addopts = "-ra"
