"""
Collect documentation metadata for HTTP route handlers

Copyright 2022-2025, Levente Hunyadi
"""


class ConfigurationError(ValueError):
    "Raised when the documentation attached to a route handler is malformed."
