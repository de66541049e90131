"""
Core package for the MIS contest dashboard.

Submodules provide CSV fetching and parsing, report aggregation, and the
Streamlit rendering helpers orchestrated by the top-level `app.py`.
"""
