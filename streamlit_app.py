"""
Launcher for the Streamlit Log Management UI.

To run the full UI (paginated table, add/edit/delete, toasts), use:

    poetry run streamlit run streamlit_ui/main.py

Set STREAMLIT_API_URL to override the default backend (http://localhost:8000)
"""
import streamlit as st

st.set_page_config(page_title="Log Management System", page_icon="📋", layout="wide")
st.title("Log Management System")
st.caption("View, edit, and manage system logs")

st.info(
    "**Run the full UI:** `poetry run streamlit run streamlit_ui/main.py`\n\n"
    "Ensure the FastAPI backend is running (e.g. `poetry run uvicorn app.main:app --reload`). "
    "Set `STREAMLIT_API_URL` to use a different backend (default: http://localhost:8000)"
)
