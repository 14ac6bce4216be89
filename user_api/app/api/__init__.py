"""
API package containing the routers.

``router`` aggregates the domain routers that are mounted under
``/api``; service-level routes such as ``/health`` live in
``endpoints.health`` and are mounted at the root.
"""
