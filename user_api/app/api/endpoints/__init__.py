"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain.  Domain routers are aggregated in ``api/router.py``.
"""
