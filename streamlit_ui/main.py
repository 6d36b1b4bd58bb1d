"""
Log Management System: Streamlit UI.

Run from project root: streamlit run streamlit_ui/main.py
Set STREAMLIT_API_URL to use a different backend (default: http://localhost:8000)
"""
import asyncio
import logging
import sys
from pathlib import Path

# Ensure project root is on path when run as "streamlit run main.py" from streamlit_ui/
_root = Path(__file__).resolve().parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st
import structlog

from streamlit_ui.components.api_client import LogsApiError, get_health
from streamlit_ui.components.logs_table import render_logs_table
from streamlit_ui.components.pagination_bar import render_pagination
from streamlit_ui.components.toasts import render_notifications
from streamlit_ui.state.logs_store import LogsStore
from streamlit_ui.state.notifications import NotificationCenter
from streamlit_ui.state.pagination import Paginator
from streamlit_ui.utils.config import get_api_url, get_items_per_page, get_toast_ttl

# ── logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.dev.ConsoleRenderer(),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)

st.set_page_config(
    page_title="Log Management System",
    page_icon="📋",
    layout="wide",
    initial_sidebar_state="collapsed",
)


def run(coro):
    """Drive one store coroutine to completion from the script thread."""
    return asyncio.run(coro)


def _init_session() -> tuple[LogsStore, Paginator]:
    if "logs_store" not in st.session_state:
        center = NotificationCenter(ttl_seconds=get_toast_ttl())
        st.session_state["logs_store"] = LogsStore(center)
        st.session_state["paginator"] = Paginator(items_per_page=get_items_per_page())
    return st.session_state["logs_store"], st.session_state["paginator"]


store, paginator = _init_session()

if store.loading and not store.logs and store.error is None:
    with st.spinner("Loading logs..."):
        try:
            run(store.fetch_all())
        except LogsApiError:
            pass  # error is on store.error and in the toast queue

paginator.set_items(store.logs)

st.title("Log Management System")
st.caption("View, edit, and manage system logs")

render_notifications(store.notifications)

if store.error:
    st.error(f"**Error:** {store.error}")

# --- Delete confirmation ---
pending = st.session_state.get("log_to_delete")


def _clear_pending_delete():
    st.session_state["log_to_delete"] = None


def _render_delete_dialog(pending):
    st.warning(f"Delete the log by **{pending.get('owner', '')}**? This cannot be undone.")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Confirm delete", type="primary", key="confirm_delete"):
            try:
                run(store.delete(pending["id"]))
            except LogsApiError:
                st.error("Delete failed. Try again or cancel.")
            else:
                _clear_pending_delete()
                st.rerun()
    with col2:
        if st.button("Cancel", key="cancel_delete"):
            _clear_pending_delete()
            st.rerun()


if pending:
    if hasattr(st, "dialog"):
        @st.dialog("Delete log", dismissible=True, on_dismiss=_clear_pending_delete)
        def _confirm_delete_modal():
            _render_delete_dialog(pending)

        _confirm_delete_modal()
    else:
        _render_delete_dialog(pending)
        st.stop()


# --- Add log modal ---
def _clear_add_modal():
    st.session_state["show_add_log_modal"] = False


def _render_add_form():
    with st.form("add_log_form"):
        owner = st.text_input("Owner", placeholder="Enter owner name")
        log_text = st.text_area("Log Text", placeholder="Enter log message")
        col1, col2, _ = st.columns(3)
        with col1:
            submitted = st.form_submit_button("Create log", type="primary")
        with col2:
            cancel = st.form_submit_button("Cancel")
        if cancel:
            _clear_add_modal()
            st.rerun()
        if submitted:
            errors = []
            if not owner.strip():
                errors.append("Owner is required")
            if not log_text.strip():
                errors.append("Log text is required")
            if errors:
                for message in errors:
                    st.error(message)
                return
            try:
                run(store.create(owner.strip(), log_text.strip()))
            except LogsApiError as e:
                # Keep the form open with the draft intact.
                st.error(e.message)
            else:
                _clear_add_modal()
                st.rerun()


col_title, col_refresh, col_add = st.columns([6, 1, 1])
with col_title:
    count = len(store.logs)
    st.subheader(f"System Logs ({count} {'entry' if count == 1 else 'entries'})")
with col_refresh:
    if st.button("Refresh", key="refresh_logs"):
        try:
            run(store.fetch_all())
        except LogsApiError:
            pass  # shown via store.error
        st.rerun()
with col_add:
    if st.button("Add log", type="primary", key="open_add_modal"):
        st.session_state["show_add_log_modal"] = True
        st.rerun()

if st.session_state.get("show_add_log_modal"):
    if hasattr(st, "dialog"):
        @st.dialog("Add new log", dismissible=True, on_dismiss=_clear_add_modal)
        def _add_log_modal():
            _render_add_form()

        _add_log_modal()
    else:
        _render_add_form()

render_logs_table(store, paginator, run)
render_pagination(paginator)

col_backend, col_health = st.columns([6, 1])
with col_backend:
    st.caption(f"Backend: {get_api_url()}")
with col_health:
    if st.button("Check API", key="check_api_health"):
        try:
            health = run(get_health())
        except LogsApiError as e:
            st.error(e.message)
        else:
            st.caption(f"API {health.get('status', 'unknown')} (v{health.get('version', '?')})")
