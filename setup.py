import ast
import os

import setuptools

HERE = os.path.abspath(os.path.dirname(__file__))


# Read the version information from the _version.py file
def get_version():
    version_line = None
    with open(os.path.join(HERE, "src", "tzfixtures", "_version.py")) as f:
        for line in f:
            if line.startswith("__version__ ="):
                version_line = line
                break

    if version_line is None:
        raise ValueError("Version not found!")

    version_str = version_line.split("=", 1)[1].strip()

    return ast.literal_eval(version_str)


setuptools.setup(
    name="tzfixtures",
    version=get_version(),
    description="Deterministic in-memory time zone sources for tests",
    license="Apache-2.0",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    package_data={"tzfixtures": ["py.typed", "*.pyi"]},
    python_requires=">=3.9",
    install_requires=["tzlocal>=4.0"],
    extras_require={
        "tzdata": ["tzdata"],
        "test": ["pytest", "hypothesis", "tzdata"],
    },
    zip_safe=False,
)
