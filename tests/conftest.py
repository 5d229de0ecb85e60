"""Shared fixtures for rdfquads tests."""

from __future__ import annotations

import gzip
import os

import pytest

from rdfquads.config import TestConfig

TEST_DATA_DIR = os.path.join(os.path.dirname(__file__), "test_data")
SAMPLE_NQ = os.path.join(TEST_DATA_DIR, "sample.nq")

SPEC_EXAMPLE = (
    '<http://a> <http://b> "c" <http://g> .\n'
    "# comment\n"
    '<http://a> <http://b> "d" .\n'
)


@pytest.fixture()
def sample_path():
    """Path to the sample N-Quads document."""
    return SAMPLE_NQ


@pytest.fixture()
def sample_gz(tmp_path):
    """Gzipped copy of the sample document."""
    target = tmp_path / "sample.nq.gz"
    with open(SAMPLE_NQ, "rb") as src, gzip.open(target, "wb") as dst:
        dst.write(src.read())
    return target


@pytest.fixture()
def example_file(tmp_path):
    """Three-line document with two quads and a comment."""
    target = tmp_path / "example.nq"
    target.write_text(SPEC_EXAMPLE, encoding="utf-8")
    return target


@pytest.fixture()
def chunk_size():
    """Tiny read size, so that ordinary lines span several chunks."""
    return TestConfig.CHUNK_SIZE


@pytest.fixture()
def example_text():
    """Document text of :func:`example_file`."""
    return SPEC_EXAMPLE
