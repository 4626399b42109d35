from .timeseries import render_timeseries
from .errors import render_errors
from .scatter import render_scatter
from .ews import render_ews

__all__ = [
    "render_timeseries",
    "render_errors",
    "render_scatter",
    "render_ews",
]
