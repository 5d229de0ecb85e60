"""Version information for :mod:`rdfquads`."""

__all__ = [
    "VERSION",
    "get_version",
]

VERSION = "0.1.0"


def get_version() -> str:
    """Get the :mod:`rdfquads` version string."""
    return VERSION
