"""Controllers that bind the session logic to Qt widgets."""

from .filter_controller import FilterController
from .share_controller import ShareController

__all__ = ["FilterController", "ShareController"]
