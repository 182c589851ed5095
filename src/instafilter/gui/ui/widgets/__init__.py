"""Reusable widgets for the Instafilter window."""

from .filter_picker import FilterPickerDialog, pick_filter
from .image_viewer import ImageViewer
from .intensity_slider import IntensitySlider

__all__ = ["FilterPickerDialog", "ImageViewer", "IntensitySlider", "pick_filter"]
