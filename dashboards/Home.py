"""dashboards/Home.py"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from popseries.common.config import load_config
from popseries.engine import ChartLine, PopulationSeriesEngine, engine_from_config
from popseries.reporting.tables import make_growth_rate_table
from popseries.series.aggregation import rate_to_percent


def project_root() -> Path:
    # dashboards/Home.py -> dashboards -> project root
    return Path(__file__).resolve().parents[1]


def _plot(fig) -> None:
    try:
        st.plotly_chart(fig, width="stretch")
    except TypeError:
        st.plotly_chart(fig, use_container_width=True)


def _df(df: pd.DataFrame) -> None:
    try:
        st.dataframe(df, width="stretch")
    except TypeError:
        st.dataframe(df, use_container_width=True)


@st.cache_resource(show_spinner=False)
def load_engine() -> PopulationSeriesEngine:
    cfg = load_config(project_root() / "configs" / "config.yaml")
    return engine_from_config(cfg)


def _add_lines(fig: go.Figure, lines: list[ChartLine]) -> None:
    for line in lines:
        fig.add_trace(
            go.Scatter(
                # categories, so recorded and projected years share one axis
                x=[str(y) for y in line.years],
                y=line.values,
                name=line.name,
                mode="lines",
                line={"color": line.color},
            )
        )


def population_figure(engine: PopulationSeriesEngine, rate: float) -> go.Figure:
    fig = go.Figure()
    _add_lines(fig, [*engine.population_lines(), engine.projection_line(rate)])
    fig.update_layout(xaxis_title="Year", yaxis_title="Population", legend_title=None)
    fig.update_xaxes(type="category")
    return fig


def growth_rate_figure(engine: PopulationSeriesEngine) -> go.Figure:
    fig = go.Figure()
    _add_lines(fig, engine.growth_rate_lines())
    for ref in engine.reference_lines():
        fig.add_hline(
            y=ref.value,
            line_dash="dash",
            line_color=ref.color,
            opacity=0.5,
            annotation_text=f"{ref.label} - {ref.value:g}",
        )
    fig.update_layout(xaxis_title="Year", yaxis_title="Growth rate", yaxis_range=[-1, 1])
    fig.update_xaxes(type="category")
    return fig


def main() -> None:
    st.set_page_config(page_title="Population trends", layout="wide")

    engine = load_engine()
    settings = engine.settings

    st.title(f"Population trends of {engine.seed.country}")
    if engine.seed.source_url:
        st.caption(f"Data from [{engine.seed.source}]({engine.seed.source_url})")
    else:
        st.caption(f"Data from {engine.seed.source}")

    rate = st.number_input(
        "Set a future population growth rate:",
        min_value=float(settings.rate_min),
        max_value=float(settings.rate_max),
        value=float(settings.default_rate),
        step=float(settings.rate_step),
        format="%.5f",
    )
    st.write(f"Future yearly population growth: **{rate_to_percent(rate):g}%**")

    _plot(population_figure(engine, rate))
    _plot(growth_rate_figure(engine))

    with st.expander("Growth rate table"):
        _df(make_growth_rate_table(engine.growth_rates()))


if __name__ == "__main__":
    main()
