import pytest

from sroc import parse

SAMPLE = """\
# Example configuration
; both comment styles are accepted
name = "sroc"
verbose = false
retries = 3

[server]
host = "localhost"
port = 8080
offsets = [-1, 0, 1]
banner = "Welcome
to the server"

[client]
tags = [
    "alpha",
    "beta",
]
empty = []
enabled = true
"""


@pytest.fixture
def sample_text():
    return SAMPLE


@pytest.fixture
def sample_document():
    return parse(SAMPLE)


@pytest.fixture
def write_config(tmp_path):
    def _write(text, name="config.sroc"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
