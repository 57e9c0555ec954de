"""Utility functions for the ucomp package."""

import importlib.metadata
import platform
import sys


def _get_version(package_name):
    """Get installed version of a package, or 'not installed'."""
    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        return "not installed"


def show_versions():
    """Print system info and installed dependency versions for debugging."""
    print("\nSystem:")
    print(f"  python: {sys.version}")
    print(f"  machine: {platform.platform()}")

    print("\nUComp:")
    print(f"  ucomp: {_get_version('ucomp')}")

    print("\nDependencies:")
    for pkg in ["numpy", "pandas"]:
        print(f"  {pkg}: {_get_version(pkg)}")
