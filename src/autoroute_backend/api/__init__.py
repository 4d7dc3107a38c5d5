"""API layer: application factory, cross-cutting dependencies and route modules.

Example: ./routes/user/me.py with
router = APIRouter()
@router.get("")
def read_current_user(...) -> UserResponse: ...
is served at ``/user/me``.
"""

from autoroute_backend.api.app import create_api

__all__ = ["create_api"]
