import sys
from importlib import metadata

import fallible


def test_dev_version(monkeypatch, mocker):
    # When run in dev environment without installation
    monkeypatch.delitem(sys.modules, "fallible.core.version")
    mocker.patch("importlib.metadata.version", side_effect=metadata.PackageNotFoundError)
    from fallible.core.version import FALLIBLE_VERSION

    # Then it's version is "dev"
    assert FALLIBLE_VERSION == "dev"


def test_public_api():
    for name in fallible.__all__:
        assert hasattr(fallible, name)
