"""Grid transformation and rendering."""

from .config import RenderConfig
from .render import layouts_to_records, pages_to_records, render_pages, render_text
from .transform import transform_pages

__all__ = [
    "RenderConfig",
    "layouts_to_records",
    "pages_to_records",
    "render_pages",
    "render_text",
    "transform_pages",
]
