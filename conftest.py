"""
pytest configuration for Text Diff.
Puts the src directory on the path and isolates tests from the user's config directory.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

project_root = Path(__file__).parent.absolute()
sys.path.insert(0, str(project_root / "src"))

# Must be set before textdiff.main builds the module-level app
_config_dir = tempfile.mkdtemp(prefix="textdiff-tests-")
os.environ['TEXTDIFF_CONFIG_DIR'] = _config_dir


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """A fresh, empty config directory for a single test."""
    monkeypatch.setenv('TEXTDIFF_CONFIG_DIR', str(tmp_path))
    return tmp_path


@pytest.fixture
def app():
    from textdiff.main import create_app

    flask_app = create_app(config={})
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
