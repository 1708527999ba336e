from setuptools import setup, find_packages


setup(
    name = "baltree",
    version = "0.1.0",
    description = "AVL balanced binary search tree",
    packages = find_packages(exclude=["tests", "tests.*"]),
    python_requires = ">=3.6",
    extras_require = {
        "test": ["pytest"],
        },
)
