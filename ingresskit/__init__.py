"""Typed parsing and validation of ingress annotations, with host-name matching."""

__version__ = "0.1.0"