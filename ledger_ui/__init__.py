"""NiceGUI console for the distributed ledger HTTP API."""

__version__ = "0.1.0"
