"""
Module: output

Purpose:
    Preview rendering of composed scenes using PIL.

Key Functions:
    - render_preview(): Scene to PIL Image
    - save_preview(): Scene to image file
"""

from .preview import render_preview, save_preview

__all__ = [
    "render_preview",
    "save_preview",
]
