"""
libriscv docs - Landing Page
Built with Streamlit

Page shell: sets the page title and description from site config, then
mounts the landing page body (hero header + feature grid).

Run:
    streamlit run app.py
"""

import streamlit as st

from config import get_log_level, load_site_config
from landing import render_landing_page
from utils.logging_config import setup_logging

setup_logging(get_log_level())

# Fails loudly on a missing tagline rather than rendering a blank header
site = load_site_config()

# Page config
st.set_page_config(
    page_title=site.title,
    page_icon="🧩",
    layout="wide",
    initial_sidebar_state="collapsed",
    menu_items={"About": site.description},
)

render_landing_page(site)
