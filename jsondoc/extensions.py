# jsondoc/extensions.py
from pathlib import Path
from typing import Any, Dict

from flask import Flask, current_app
from flask_cors import CORS

from .storage.json_store import JsonDocumentStore

EXTENSION_KEY = "jsondoc_store"


class DocumentStore:
    """Binds a JsonDocumentStore to each app built from config."""

    def __init__(self, app: Flask | None = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> JsonDocumentStore:
        backing = JsonDocumentStore(
            Path(app.config["DATA_FILE"]),
            atomic_writes=app.config.get("DATA_ATOMIC_WRITES", False),
        )
        # WriteError propagates: no usable data file, no app
        backing.initialize()
        app.extensions[EXTENSION_KEY] = backing
        return backing

    def get_store(self, app: Flask | None = None) -> JsonDocumentStore:
        app = app or current_app
        return app.extensions[EXTENSION_KEY]

    def read(self) -> Dict[str, Any]:
        return self.get_store().read()

    def replace(self, doc: Dict[str, Any]) -> None:
        self.get_store().replace(doc)


# CORS is a real Flask extension (keeps init_app)
cors = CORS()

store = DocumentStore()
