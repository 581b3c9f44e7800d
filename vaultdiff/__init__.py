"""Reshape, combine, hide, validate, watch and snapshot path-grouped key/value secrets."""

__version__ = "0.1.0"