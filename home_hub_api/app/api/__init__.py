"""
HTTP layer.

``router`` aggregates the JSON API under ``/api``; the ``pages``
router serves the site's HTML entry points at the root.
"""
