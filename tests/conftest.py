"""
Test configuration and utilities.
"""

import tempfile
import shutil
from pathlib import Path
import pytest

from fuzzy_indexer.config import Config, IndexingConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_files(temp_dir):
    """Create sample files for testing."""
    # Create directory structure
    (temp_dir / "subdir").mkdir()
    (temp_dir / "subdir" / "nested").mkdir()
    (temp_dir / ".git").mkdir()

    files = {
        "main.cc": "int main() {}",
        "README.md": "# Test Project",
        "subdir/file.txt": "Nested file content.",
        "subdir/nested/deep.txt": "Deep nested content.",
        ".git/config": "[core]",
    }

    for file_path, content in files.items():
        full_path = temp_dir / file_path
        full_path.write_text(content)

    return temp_dir


@pytest.fixture
def test_config():
    """Create a test configuration."""
    return Config(
        indexing=IndexingConfig(
            ignore_names=(".git", "__pycache__"),
        )
    )
