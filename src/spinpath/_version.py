"""Minimal version helper for spinpath."""

from importlib import metadata

PACKAGE_NAME = "spinpath"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # dev checkout
        import setuptools_scm  # type: ignore[import-untyped]

        try:
            return str(setuptools_scm.get_version(fallback_version=FALLBACK_VERSION))
        except LookupError:
            return FALLBACK_VERSION


__all__ = ["get_version"]
