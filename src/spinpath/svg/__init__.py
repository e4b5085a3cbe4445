"""SVG path rendering."""

from .path import SVG_NS, bounding_box, format_number, path_data, render_svg

__all__ = ["SVG_NS", "bounding_box", "format_number", "path_data", "render_svg"]
