"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one resource.  The routers are
aggregated in ``router.py`` and then included in the main application.
"""
