"""Editable, paginated table of log entries."""
from datetime import datetime
from typing import Any, Awaitable, Callable, Optional

import streamlit as st

from streamlit_ui.state.logs_store import LogsStore
from streamlit_ui.state.pagination import Paginator

# (column label, entry key, multiline)
EDITABLE_FIELDS = (("Owner", "owner", False), ("Log Text", "logText", True))


def format_timestamp(value: Optional[str]) -> str:
    """'2025-10-10T10:00:00Z' -> 'Oct 10, 2025, 10:00 AM'. Unparseable values pass through."""
    if not value:
        return ""
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return dt.strftime("%b %d, %Y, %I:%M %p")


def resolve_edit(original: str, edited: Optional[str]) -> Optional[str]:
    """Return the trimmed new value to save, or None if the edit should be discarded."""
    trimmed = (edited or "").strip()
    if not trimmed or trimmed == original:
        return None
    return trimmed


def _cell_key(log_id: str, field: str) -> str:
    return f"cell_{field}_{log_id}"


def _sync_cell(key: str, source: str) -> None:
    """Load `source` into the cell when the entry changed since the last render."""
    src_key = f"{key}_src"
    if key not in st.session_state or st.session_state.get(src_key) != source:
        st.session_state[key] = source
        st.session_state[src_key] = source


def _save_cell(
    store: LogsStore,
    run: Callable[[Awaitable[Any]], Any],
    log: dict[str, Any],
    field: str,
) -> None:
    """on_change callback for an editable cell."""
    key = _cell_key(log["id"], field)
    original = log.get(field) or ""
    value = resolve_edit(original, st.session_state.get(key))
    if value is None:
        st.session_state[key] = original
        return
    kwargs = {"owner": value} if field == "owner" else {"log_text": value}
    try:
        run(store.update(log["id"], **kwargs))
    except Exception:
        # Error toast already queued by the store; put the old value back.
        st.session_state[key] = original
        return
    st.session_state[key] = value


def render_logs_table(
    store: LogsStore,
    paginator: Paginator,
    run: Callable[[Awaitable[Any]], Any],
) -> None:
    """Render the current page of entries with inline editing and delete buttons."""
    if not store.logs:
        st.info("No logs found. Click **Add log** to create one.")
        return

    widths = [2, 2, 2, 5, 1]
    header = st.columns(widths)
    for col, label in zip(header, ["Owner", "Created At", "Updated At", "Log Text", "Actions"]):
        with col:
            st.markdown(f"**{label}**")

    for log in paginator.paginated_data:
        log_id = log.get("id")
        if not log_id:
            continue
        c_owner, c_created, c_updated, c_text, c_actions = st.columns(widths)
        with c_owner:
            key = _cell_key(log_id, "owner")
            _sync_cell(key, log.get("owner") or "")
            st.text_input(
                "Owner",
                key=key,
                placeholder="Owner",
                label_visibility="collapsed",
                on_change=_save_cell,
                args=(store, run, log, "owner"),
            )
        with c_created:
            st.text(format_timestamp(log.get("createdAt")))
        with c_updated:
            st.text(format_timestamp(log.get("updatedAt")))
        with c_text:
            key = _cell_key(log_id, "logText")
            _sync_cell(key, log.get("logText") or "")
            st.text_area(
                "Log text",
                key=key,
                placeholder="Log text",
                height=68,
                label_visibility="collapsed",
                on_change=_save_cell,
                args=(store, run, log, "logText"),
            )
        with c_actions:
            if st.button("Delete", key=f"delete_{log_id}", help=f"Delete log by {log.get('owner', '')}"):
                st.session_state["log_to_delete"] = {"id": log_id, "owner": log.get("owner", "")}
                st.rerun()
