"""Shared pytest fixtures for jpaz tests."""

import pytest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jpaz import Analyzer  # noqa: E402


# ============================================================================
# Text Fixtures
# ============================================================================

SAMPLE_SENTENCE = (
    "だから今日も一旦家に帰って、ランドセルを置いてからすぐに習い事へ向かう用意をする。でも昨日、"
)


@pytest.fixture
def sample_sentence():
    """Mixed Hiragana/Katakana/Kanji sentence with known counts."""
    return SAMPLE_SENTENCE


@pytest.fixture
def sample_analyzer(sample_sentence):
    """Analyzer that has ingested the sample sentence once."""
    analyzer = Analyzer()
    analyzer.ingest_string(sample_sentence)
    return analyzer


# ============================================================================
# File Fixtures
# ============================================================================

@pytest.fixture
def sample_file(tmp_path, sample_sentence):
    """UTF-8 text file containing the sample sentence split over two lines."""
    path = tmp_path / "sample.txt"
    head, tail = sample_sentence[:20], sample_sentence[20:]
    path.write_text(f"{head}\n{tail}\n", encoding="utf-8")
    return path


@pytest.fixture
def invalid_utf8_file(tmp_path):
    """File whose second line is not valid UTF-8."""
    path = tmp_path / "broken.txt"
    path.write_bytes("ひらがな\n".encode("utf-8") + b"\xff\xfe\xfa\n")
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any JPAZ_* overrides."""
    for key in list(os.environ):
        if key.startswith("JPAZ_"):
            monkeypatch.delenv(key, raising=False)
    yield
