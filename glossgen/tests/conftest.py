"""
Pytest configuration and fixtures.
"""
import pytest
import tempfile
import shutil
from pathlib import Path

from glossgen.core.glossary_index import GlossaryIndex
from glossgen.core.cross_linker import CrossLinker


@pytest.fixture
def temp_dir():
    """Create temporary directory."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_records():
    """The map/key glossary."""
    return [
        ("map", "a mapping from key to value"),
        ("key", "an index into a map"),
    ]


@pytest.fixture
def sample_index(sample_records):
    return GlossaryIndex.from_records(sample_records)


@pytest.fixture
def sample_linker(sample_index):
    return CrossLinker(sample_index)


@pytest.fixture
def terms_file(temp_dir):
    """Terms file in the line-oriented record format."""
    path = temp_dir / "terms.txt"
    path.write_text(
        "map\n"
        "a mapping from\n"
        "key to value\n"
        "\n"
        "key\n"
        "an index into a map\n",
        encoding="utf-8"
    )
    return path


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Setup test environment variables."""
    monkeypatch.setenv("TESTING", "true")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    for name in ("GLOSSGEN_SEPARATORS", "GLOSSGEN_DUPLICATE_POLICY",
                 "GLOSSGEN_OUTPUT_DIR", "GLOSSGEN_INDEX_NAME"):
        monkeypatch.delenv(name, raising=False)
