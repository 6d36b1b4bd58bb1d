"""Toast area for the NotificationCenter."""
import streamlit as st

from streamlit_ui.state.notifications import NotificationCenter

# Expiry timers run off the script thread; poll so expired toasts leave the page.
REFRESH_SECONDS = 1


@st.fragment(run_every=REFRESH_SECONDS)
def render_notifications(center: NotificationCenter) -> None:
    notifications = center.notifications
    for notification in notifications:
        body, close = st.columns([12, 1])
        with body:
            if notification.kind == "success":
                st.success(notification.message)
            else:
                st.error(notification.message)
        with close:
            if st.button("✕", key=f"dismiss_{notification.id}", help="Close notification"):
                center.remove(notification.id)
                st.rerun()
    if len(notifications) > 1:
        if st.button("Dismiss all", key="dismiss_all_notifications"):
            center.clear()
            st.rerun()
