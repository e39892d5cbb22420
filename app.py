# app.py
import streamlit as st

from movecalc import content
from movecalc.logs import configure_logging

configure_logging()

# Page configuration (sets window title and layout)
st.set_page_config(
    page_title="Moving Cost Estimator",
    page_icon=content.PAGE_ICON,
    layout="centered"
)

st.title(f"{content.PAGE_ICON} {content.APP_TITLE}")

st.write("""
Estimate what a move will cost before you call a mover.

Use the sidebar on the left to:
- **🚚 Estimate:** Price a single move from distance, home size, move type and add-on services.
- **📊 Compare:** See the same move priced as local and long distance, across a range of distances.
- **📦 Bulk:** Upload a CSV or Excel sheet of moves and download the estimates.

Every estimate is a point figure plus a range (−20% / +30%) to reflect how much real quotes vary.
""")

st.caption(content.DISCLAIMER)
