"""Streamlit front end for the university student management system."""

__version__ = "0.1.0"
