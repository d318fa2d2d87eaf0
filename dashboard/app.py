import streamlit as st
import altair as alt
from ui_helpers import format_possibility, display_header, display_section_title
from pathlib import Path
import sys

# Add the project root to sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app_utils import get_summary_cached, get_outlook_cached, default_month, outlook_to_frame
from config import settings
from hurricane.constants import MONTH_NAMES
from hurricane.errors import HurricaneDataError
from hurricane.logger import setup_logging
from hurricane.transformers import summary_to_frames


st.set_page_config(
    layout="wide",
    page_title="Hurricane Outlook",
    initial_sidebar_state="collapsed"
)


def _sheet_location() -> str:
    """Sheet location from Streamlit secrets, falling back to the environment setting."""
    try:
        if "SHEET_URL" in st.secrets:
            return st.secrets["SHEET_URL"]
    except FileNotFoundError:
        # No secrets.toml; local runs configure the sheet through the environment.
        pass
    return settings.get_sheet_url()


def run():
    setup_logging()
    display_header()

    location = _sheet_location()
    st.caption(f"Source: {location}")

    try:
        with st.spinner("Fetching hurricanes data..."):
            summary = get_summary_cached(location)
            outlook = get_outlook_cached(location)
    except HurricaneDataError as e:
        st.error(f"❌ Failed to fetch hurricanes data. Please try again. ({e})")
        return

    # --- Possibility for a month ---
    display_section_title("Possibility of Hurricanes")

    month = st.selectbox(
        "Month",
        MONTH_NAMES,
        index=MONTH_NAMES.index(default_month()),
        key="month_select",
    )
    possibility = outlook.get(month)
    if possibility is None:
        st.warning(f"Could not predict hurricanes for {month}. Not enough data.")
    else:
        with st.container(border=True):
            st.metric(label=f"Possibility of hurricanes in {month}", value=f"{possibility}%")

    outlook_df = outlook_to_frame(outlook)
    outlook_df["Possibility"] = outlook_df["Possibility (%)"].map(format_possibility)
    st.markdown(
        outlook_df[["Month", "Possibility"]].to_html(escape=False, index=False),
        unsafe_allow_html=True
    )

    # --- Historical totals ---
    years_df, months_df = summary_to_frames(summary)

    display_section_title("Hurricanes per Year")
    if years_df.empty:
        st.info("No yearly data available.")
    else:
        year_chart = alt.Chart(years_df).mark_bar().encode(
            x=alt.X('year:N', title='Year'),
            y=alt.Y('hurricanes:Q', title='Hurricanes'),
        )
        st.altair_chart(year_chart, use_container_width=True)

    display_section_title("Hurricanes per Month")
    if months_df.empty:
        st.info("No monthly data available.")
    else:
        month_chart = alt.Chart(months_df).mark_bar().encode(
            x=alt.X('month:N', sort=MONTH_NAMES, title='Month'),
            y=alt.Y('hurricanes:Q', title='Hurricanes'),
        )
        st.altair_chart(month_chart, use_container_width=True)


if __name__ == "__main__":
    run()
