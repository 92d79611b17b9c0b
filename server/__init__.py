"""READMEaker backend: document store, Markdown composition and HTTP API."""

__version__ = "0.1.0"
