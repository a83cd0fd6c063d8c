"""CSS overrides for the dashboard layout."""
import streamlit as st


def apply_styles(sidebar_collapsed: bool = False):
    """Apply layout CSS; a collapsed side panel shrinks to an icon rail."""
    sidebar_width = "5rem" if sidebar_collapsed else "16rem"
    st.markdown(f"""
    <style>
    section[data-testid="stSidebar"] {{
        width: {sidebar_width} !important;
        min-width: {sidebar_width} !important;
        max-width: {sidebar_width} !important;
    }}

    section[data-testid="stSidebar"] > div:first-child {{
        cursor: default !important;
    }}

    /* Metric cards */
    div[data-testid="stMetric"] {{
        border: 1px solid rgba(128, 128, 128, 0.25);
        border-radius: 0.5rem;
        padding: 0.75rem 1rem;
    }}

    @media (max-width: 768px) {{
        .stButton button {{
            min-height: 48px !important;
            font-size: 16px !important;
        }}

        .block-container {{
            padding-left: 1rem !important;
            padding-right: 1rem !important;
        }}

        /* Prevent zoom on iOS */
        input, select, textarea {{
            font-size: 16px !important;
        }}
    }}
    </style>
    """, unsafe_allow_html=True)
