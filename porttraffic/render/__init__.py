from .chart import save_chart
from .snapshot import RenderReport, delta_points, has_traffic, should_render, render_port, render_all

__all__ = ["save_chart", "RenderReport", "delta_points", "has_traffic", "should_render", "render_port", "render_all"]
