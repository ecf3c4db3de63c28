"""blindgate: anonymous identity, verification and session service."""

__version__ = "0.1.0"
