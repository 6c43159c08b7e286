"""leadbooth - multi-tenant trade-show lead capture service."""

__version__ = "0.1.0"
