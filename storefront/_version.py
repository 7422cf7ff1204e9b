from importlib.metadata import PackageNotFoundError, version


def _detect_version() -> str:
    """
    Detect storefront version.

    Falls back to a development placeholder if the package metadata
    is not available.
    """
    try:
        return version("storefront")
    except PackageNotFoundError:
        return "0.0.0-dev"


__version__ = _detect_version()
