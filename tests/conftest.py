"""Shared test fixtures for wordnet-graph."""

from pathlib import Path

import pytest

from wordnet_graph import load

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def data_dir():
    """Directory holding the small WNDB fixture database."""
    return FIXTURES / "wndb"


@pytest.fixture(scope="session")
def wordnet(data_dir):
    """The fixture database, loaded once for the whole run."""
    return load(data_dir)


@pytest.fixture
def write_data(tmp_path):
    """Write data files into a temporary directory.

    Call with ``name=lines`` pairs; returns the directory.
    """

    def _write(**files):
        for name, lines in files.items():
            text = "".join(line + "\n" for line in lines)
            (tmp_path / name.replace("_", ".")).write_bytes(text.encode("utf-8"))
        return tmp_path

    return _write
