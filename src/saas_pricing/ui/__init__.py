"""UI subpackage - Streamlit calculator page."""
