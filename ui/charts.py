"""Chart rendering from in-memory series (plotly express)."""
from typing import Optional, Protocol, Sequence, Union

import pandas as pd
import plotly.express as px
import streamlit as st

# Same palette across every pie/bar so categories keep their colours
PALETTE = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884D8", "#F54F52", "#93F03B", "#9552EA"]

CHART_KINDS = ("bar", "line", "area", "pie")

Series = Union[pd.DataFrame, Sequence[dict]]


class ChartRenderer(Protocol):
    def render(self, series: Series, kind: str, **options) -> None:
        ...


def build_figure(
    series: Series,
    kind: str,
    x: str = "name",
    y: Union[str, Sequence[str]] = "value",
    title: Optional[str] = None,
    labels: Optional[dict] = None,
):
    """Build a plotly figure for `kind` (bar, line, area or pie)."""
    if kind not in CHART_KINDS:
        raise ValueError(f"Unsupported chart kind: {kind}")
    df = series if isinstance(series, pd.DataFrame) else pd.DataFrame(list(series))
    labels = labels or {}

    if kind == "pie":
        values = y if isinstance(y, str) else y[0]
        fig = px.pie(
            df,
            values=values,
            names=x,
            title=title,
            color_discrete_sequence=PALETTE,
            hole=0.35,
        )
    elif kind == "bar":
        fig = px.bar(
            df, x=x, y=y, title=title, labels=labels, barmode="group",
            color_discrete_sequence=PALETTE,
        )
    elif kind == "line":
        fig = px.line(df, x=x, y=y, title=title, labels=labels, markers=True,
                      color_discrete_sequence=PALETTE)
    else:
        fig = px.area(df, x=x, y=y, title=title, labels=labels,
                      color_discrete_sequence=PALETTE)
    fig.update_layout(margin=dict(l=10, r=10, t=40 if title else 10, b=10), legend_title_text="")
    return fig


class PlotlyChartRenderer:
    """Default ChartRenderer: plotly figures inside Streamlit."""

    def render(self, series: Series, kind: str, key: Optional[str] = None, **options) -> None:
        if len(series) == 0:
            st.info("No data to display")
            return
        st.plotly_chart(build_figure(series, kind, **options), width="stretch", key=key)


charts = PlotlyChartRenderer()
