"""
Shared test fixtures and configuration for jsondoc tests.
"""
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from jsondoc import create_app
from jsondoc.config import Config
from jsondoc.storage.json_store import JsonDocumentStore


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path for the backing data file; does not exist until the store creates it."""
    return tmp_path / "data" / "data.json"


@pytest.fixture
def website_dir(tmp_path: Path) -> Path:
    """Create a temporary website directory with an index page and one asset."""
    site = tmp_path / "website"
    (site / "css").mkdir(parents=True)
    (site / "index.html").write_text("<h1>cart</h1>", encoding="utf-8")
    (site / "app.js").write_text("console.log('cart');", encoding="utf-8")
    (site / "css" / "index.html").write_text("<p>css index</p>", encoding="utf-8")
    (site / "css" / "site.css").write_text("body { margin: 0; }", encoding="utf-8")
    return site


@pytest.fixture
def config_class(data_file: Path, website_dir: Path) -> type[Config]:
    class TestConfig(Config):
        TESTING = True
        DATA_FILE = data_file
        WEBSITE_DIR = website_dir
        DATA_ATOMIC_WRITES = False

    return TestConfig


@pytest.fixture
def app(config_class) -> Flask:
    """Create a Flask application bound to a temporary data file."""
    yield create_app(config_class)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def document_store(data_file: Path) -> JsonDocumentStore:
    """Create an initialized JsonDocumentStore on a temporary path."""
    s = JsonDocumentStore(data_file)
    s.initialize()
    return s
