"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each entity kind (users, contacts, newsletter
subscriptions, cost estimates) has its own schema module and service
class, and the HTTP routes live in ``api/endpoints``.
"""

from .main import app, create_app  # noqa: F401
