"""
Pitch Board - Rendering Module

Rendering components for the pitch, the bench and token markers.
"""

from .bench_renderer import BenchRenderer
from .field_renderer import FieldRenderer
from .render_context import FontCache, RenderContext

__all__ = ["BenchRenderer", "FieldRenderer", "FontCache", "RenderContext"]
