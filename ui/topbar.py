import streamlit as st
from core.i18n import t
from core.state import get_active_language, toggle_language
from core.version import __version__


def _sync_language_prefs():
    st.session_state.setdefault("ui_prefs", {})
    st.session_state["ui_prefs"]["language"] = get_active_language().value


def _on_language_toggle():
    toggle_language()
    _sync_language_prefs()


def render_language_toggle():
    """Button showing the other language's code; clicking switches to it."""
    _sync_language_prefs()
    st.button(t("common.langToggle"), key="lang_toggle", on_click=_on_language_toggle)


def render_topbar():
    """Render the sticky top bar and return the selected view."""
    st.markdown(
        """
        <style>
        .kwt-topbar {position:sticky; top:0; background-color:white; z-index:100; padding:4px 8px; border-bottom:1px solid #ddd;}
        .kwt-topbar div[data-testid="stHorizontalBlock"] {align-items:center;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    with st.container():
        st.markdown('<div class="kwt-topbar">', unsafe_allow_html=True)
        left, center, right = st.columns([2, 3, 1])
        with left:
            st.markdown(f"**{t('nav.home')}** v{__version__}")
        with center:
            view = st.radio(
                t("nav.home"),
                ["home", "scan", "manual"],
                format_func=lambda v: t(f"nav.{v}"),
                horizontal=True,
                label_visibility="collapsed",
                key="view_mode",
            )
        with right:
            render_language_toggle()
        st.markdown("</div>", unsafe_allow_html=True)
    return view
