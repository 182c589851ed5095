"""Widgets, controllers and workers that make up the main window."""
