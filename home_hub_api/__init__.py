"""
Top‑level package for the Smart Home Hub API.

This file makes ``home_hub_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``home_hub_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
