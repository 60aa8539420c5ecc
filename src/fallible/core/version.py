from importlib import metadata


def get_version(distribution: str = "fallible") -> str:
    """Installed version of `distribution`, or "dev" for a source checkout."""
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return "dev"


FALLIBLE_VERSION = get_version()
