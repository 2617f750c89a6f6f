"""Limit core updates to the next beta/RC release when running a beta/RC release."""

__version__ = "0.1.0"
