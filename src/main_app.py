"""
Forest Watch — Streamlit entry point.

    streamlit run src/main_app.py
"""

import streamlit as st

from about import show_about_page
from dashboard import show_dashboard_page

PROJECT_TITLE = "Forest Watch"


def set_page_config():
    st.set_page_config(
        page_title=PROJECT_TITLE,
        page_icon="🌲",
        layout="wide",
        initial_sidebar_state="collapsed"
    )


def render_footer():
    st.markdown(
        """
        <div class="footer">
            Forest Watch · simulated sensor network · data refreshes on reload
        </div>
        """,
        unsafe_allow_html=True,
    )


def main():
    set_page_config()

    # GLOBAL CSS - loaded once and stays for the entire session
    st.markdown("""
    <style>
        * { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; }

        .block-container {
            max-width: 1200px !important;
            margin: 0 auto !important;
            padding-top: 2rem !important;
        }

        .hero {
            text-align: center;
            padding-bottom: 2rem;
        }

        .hero-title, .page-title {
            font-size: 2.6rem;
            font-weight: 700;
            letter-spacing: -1px;
            background: linear-gradient(135deg, #2e7d32 0%, #66bb6a 100%);
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
            background-clip: text;
        }

        .hero-subtitle, .page-subtitle {
            font-size: 1rem;
            color: #777777;
            margin-top: 0.5rem;
        }

        .section-header {
            font-size: 1.5rem;
            font-weight: 600;
            margin-top: 2.5rem;
            margin-bottom: 1rem;
            padding-bottom: 0.5rem;
            border-bottom: 2px solid #2e7d32;
        }

        .metric-card {
            border: 1px solid #2e7d32;
            border-radius: 8px;
            padding: 1rem;
            text-align: center;
        }

        .metric-label {
            font-size: 0.85rem;
            color: #777777;
            text-transform: uppercase;
            letter-spacing: 0.5px;
        }

        .metric-value {
            font-size: 1.6rem;
            font-weight: 700;
            color: #2e7d32;
        }

        .footer {
            margin-top: 3rem;
            padding-top: 1rem;
            border-top: 1px solid #dddddd;
            font-size: 0.8rem;
            color: #999999;
            text-align: center;
        }

        /* Hide sidebar */
        [data-testid="stSidebarNav"] { display: none; }
        [data-testid="stSidebar"] { display: none; }
    </style>
    """, unsafe_allow_html=True)

    # Initialize session state
    if 'page' not in st.session_state:
        st.session_state.page = 'dashboard'

    # Simple navigation buttons
    btn1, btn2 = st.columns([1, 1], gap="small")

    with btn1:
        if st.button("Dashboard", use_container_width=True, key="btn_dashboard"):
            st.session_state.page = 'dashboard'

    with btn2:
        if st.button("About", use_container_width=True, key="btn_about"):
            st.session_state.page = 'about'

    st.markdown("")

    # Render the selected page
    if st.session_state.page == 'about':
        show_about_page(render_footer)
    else:
        show_dashboard_page(render_footer)


if __name__ == "__main__":
    main()
