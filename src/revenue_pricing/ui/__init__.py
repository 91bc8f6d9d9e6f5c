"""Streamlit front end for the revenue pricing calculator."""
