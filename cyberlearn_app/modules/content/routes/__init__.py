from .. import content_bp
from . import api  # noqa: F401  (registers the routes on content_bp)

__all__ = ["content_bp"]
