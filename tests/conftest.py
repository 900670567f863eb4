"""Shared pytest fixtures for the intcalc test suite."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Write an intcalc.toml with 8-bit arithmetic and strict lexing."""
    toml = tmp_path / "intcalc.toml"
    toml.write_text(
        "[lexer]\nstrict = true\n"
        "[arithmetic]\nbits = 8\n"
        "[parser]\nmax_depth = 5\n"
        "[output]\ncolor = false\n"
    )
    return toml
