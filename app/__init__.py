"""
Presentation layer — Streamlit dashboard and command line.
"""
