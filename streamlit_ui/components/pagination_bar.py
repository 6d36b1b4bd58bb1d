"""Previous / page numbers / Next controls."""
import streamlit as st

from streamlit_ui.state.pagination import ELLIPSIS, Paginator, page_numbers


def render_pagination(paginator: Paginator) -> None:
    """Render the bar; hidden when everything fits on one page."""
    total = paginator.total_pages
    if total <= 1:
        return

    labels = page_numbers(paginator.current_page, total)
    cols = st.columns([2] + [1] * len(labels) + [2])

    with cols[0]:
        if st.button("Previous", key="page_prev", disabled=not paginator.has_previous_page):
            paginator.previous_page()
            st.rerun()

    for i, label in enumerate(labels, start=1):
        with cols[i]:
            if label == ELLIPSIS:
                st.markdown(ELLIPSIS)
                continue
            is_current = label == paginator.current_page
            if st.button(
                str(label),
                key=f"page_{label}",
                type="primary" if is_current else "secondary",
            ):
                paginator.go_to_page(label)
                st.rerun()

    with cols[-1]:
        if st.button("Next", key="page_next", disabled=not paginator.has_next_page):
            paginator.next_page()
            st.rerun()

    st.caption(f"Page {paginator.current_page} of {total}")
