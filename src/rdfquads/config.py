"""Decoder configuration loaded from environment variables."""

from __future__ import annotations

import os


class Config:
    """Default configuration for decoding N-Quads streams."""

    # Characters requested from the source per read; longer physical
    # lines are assembled from several chunks.
    CHUNK_SIZE = int(os.getenv("RDFQUADS_CHUNK_SIZE", "4096"))

    # Encoding used when the source is a binary stream or a file path
    ENCODING = os.getenv("RDFQUADS_ENCODING", "utf-8")

    # Format used by the CLI when --verbose is given
    LOG_FORMAT = os.getenv(
        "RDFQUADS_LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class TestConfig(Config):
    """Configuration overrides for testing."""

    TESTING = True
    CHUNK_SIZE = 8
