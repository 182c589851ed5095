"""Background worker helpers for GUI tasks."""

from .image_load_worker import ImageLoadSignals, ImageLoadWorker

__all__ = ["ImageLoadSignals", "ImageLoadWorker"]
