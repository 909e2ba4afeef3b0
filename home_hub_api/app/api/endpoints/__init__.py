"""
Endpoint modules, one per area of the site.
"""
