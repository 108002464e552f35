"""
About page — what the data is and how it gets cleaned before display.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import streamlit as st

_PROJECT_ROOT = Path(__file__).parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from forest_watch.config import load_config  # noqa: E402

_cfg = load_config("app")
_page = _cfg["page"]
_categories = _cfg["events"]["categories"]


def show_about_page(render_footer: Callable[[], None]) -> None:
    st.markdown(
        f"""
        <div class="hero" style="padding-bottom: 1rem;">
            <div class="page-title">About {_page['title']}</div>
            <div class="page-subtitle">Where the numbers come from</div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    st.markdown('<h2 class="section-header">The data</h2>', unsafe_allow_html=True)
    st.markdown(
        f"""
        Each row of `{_cfg['data']['csv_path']}` is one reading from a simulated forest
        sensor node: a timestamp, air temperature, barometric pressure, a three-axis
        motion sample, the node's GPS fix as a `"lat,lon"` pair, and an optional event
        tag. Known tags are {", ".join(f"`{c}`" for c in _categories)}.
        """
    )

    st.markdown('<h2 class="section-header">Cleaning rules</h2>', unsafe_allow_html=True)
    st.markdown(
        """
        - Headers and values are trimmed and stripped of stray quote characters.
        - Completely empty rows are skipped.
        - A row without a parseable timestamp or a valid `lat,lon` location is dropped.
        - A bad temperature, pressure or motion value only blanks that one field;
          the rest of the row is kept.
        - Motion magnitude is `√(x² + y² + z²)`, left blank if any axis is missing.
        - A missing event tag is shown as `None`.
        - All times are shown in UTC. Times without a zone are read as UTC.
        """
    )

    st.markdown('<h2 class="section-header">Reading the page</h2>', unsafe_allow_html=True)
    st.markdown(
        """
        The event filter narrows the trend charts, the map and the log. The event
        distribution chart always counts the full dataset so the overall mix stays
        visible while you drill in.
        """
    )

    render_footer()
