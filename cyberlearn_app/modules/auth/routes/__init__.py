from .. import auth_bp
from . import api  # noqa: F401  (registers the routes on auth_bp)

__all__ = ["auth_bp"]
