import streamlit as st


def format_possibility(value):
    """
    Formats a possibility percentage, coloured by how likely a hurricane is.
    """
    if value is None:
        return "N/A"

    if value >= 50:
        color = "red"
    elif value >= 10:
        color = "orange"
    else:
        color = "green"
    return f"<span style='color:{color}'>{value:.2f}%</span>"


def display_header():
    """
    Displays the main header of the dashboard.
    """
    st.title("Hurricane Outlook")


def display_section_title(title):
    """
    Displays a section title.
    """
    st.header(title)
