"""Streamlit binding: controls, session-held state and page sections."""
