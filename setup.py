#!/usr/bin/env python
import os
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path

from packaging.requirements import Requirement
from packaging.specifiers import SpecifierSet
from setuptools import find_packages, setup

_PATH_ROOT = os.path.realpath(os.path.dirname(__file__))
_PATH_SOURCE = os.path.join(_PATH_ROOT, "src")
_PATH_REQUIRE = os.path.join(_PATH_ROOT, "requirements")
_FREEZE_REQUIREMENTS = os.environ.get("FREEZE_REQUIREMENTS", "0").lower() in ("1", "true")


def _adjust_requirement(line: str, unfreeze: bool) -> str:
    """Remove the upper version bound unless the requirement is marked as strict.

    >>> _adjust_requirement("torch >=2.0.0, <2.10.0", unfreeze=True)
    'torch>=2.0.0'
    >>> _adjust_requirement("torch<2.10.0,>=2.0.0", unfreeze=True)
    'torch>=2.0.0'
    >>> _adjust_requirement("numpy ==1.26.*, <=2.0", unfreeze=True)
    'numpy==1.26.*'
    >>> _adjust_requirement("torch >=2.0.0, <2.10.0  # strict", unfreeze=True)
    'torch<2.10.0,>=2.0.0'
    >>> _adjust_requirement("torch >=2.0.0, <2.10.0", unfreeze=False)
    'torch<2.10.0,>=2.0.0'

    """
    strict = "# strict" in line.lower()
    req = Requirement(line.split(" #")[0].strip())
    if unfreeze and not strict:
        req.specifier = SpecifierSet(",".join(str(spec) for spec in req.specifier if spec.operator not in ("<", "<=")))
    return str(req)


def _load_requirements(
    path_dir: str, file_name: str = "base.txt", unfreeze: bool = not _FREEZE_REQUIREMENTS
) -> list[str]:
    """Load requirements from a file, skipping comments, pip arguments and linked requirement files."""
    path = Path(path_dir) / file_name
    if not path.exists():
        raise ValueError(f"Path {path} not found for input dir {path_dir} and filename {file_name}.")
    reqs = []
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith(("#", "-")):
            continue
        reqs.append(_adjust_requirement(line, unfreeze))
    return reqs


def _load_readme_description(path_dir: str) -> str:
    path_readme = os.path.join(path_dir, "README.md")
    with open(path_readme, encoding="utf-8") as fp:
        return fp.read()


def _load_py_module(fname: str, pkg: str = "chrf_ladder"):
    spec = spec_from_file_location(os.path.join(pkg, fname), os.path.join(_PATH_SOURCE, pkg, fname))
    py = module_from_spec(spec)
    spec.loader.exec_module(py)
    return py


ABOUT = _load_py_module("__about__.py")
LONG_DESCRIPTION = _load_readme_description(_PATH_ROOT)
BASE_REQUIREMENTS = _load_requirements(path_dir=_PATH_REQUIRE, file_name="base.txt")
TEST_REQUIREMENTS = _load_requirements(path_dir=_PATH_REQUIRE, file_name="test.txt")


# https://packaging.python.org/discussions/install-requires-vs-requirements /
# keep the meta-data here for simplicity in reading this file... it's not obvious
# what happens and to non-engineers they won't know to look in init ...
if __name__ == "__main__":
    setup(
        name="chrf-ladder",
        version=ABOUT.__version__,
        description=ABOUT.__docs__,
        author=ABOUT.__author__,
        license=ABOUT.__license__,
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        long_description=LONG_DESCRIPTION,
        long_description_content_type="text/markdown",
        include_package_data=True,
        zip_safe=False,
        keywords=["machine translation", "evaluation", "chrF", "n-gram", "metrics"],
        python_requires=">=3.9",
        setup_requires=["packaging"],
        install_requires=BASE_REQUIREMENTS,
        extras_require={"test": TEST_REQUIREMENTS},
        classifiers=[
            "Environment :: Console",
            "Natural Language :: English",
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "Topic :: Scientific/Engineering :: Artificial Intelligence",
            "Topic :: Scientific/Engineering :: Information Analysis",
            "License :: OSI Approved :: Apache Software License",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
        ],
    )
