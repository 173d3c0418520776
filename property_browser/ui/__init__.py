"""Streamlit pages and UI components."""
