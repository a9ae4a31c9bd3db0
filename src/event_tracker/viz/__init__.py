"""Chart builders."""

from .price_charts import ChartSession, make_event_chart, render_chart

__all__ = ["ChartSession", "make_event_chart", "render_chart"]
