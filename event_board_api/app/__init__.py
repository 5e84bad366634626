"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (configuration, logging, store, notification
bus), ``schemas`` (request and response models), ``services`` (one per
entity) and ``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
