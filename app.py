import streamlit as st
from core.i18n import t
from ui.topbar import render_topbar


STEPS = [("step1", "step1desc"), ("step2", "step2desc"), ("step3", "step3desc")]


def render_home():
    """Landing page: headline, the two entry points and the three steps."""
    st.title(t("home.title"))
    st.caption(t("home.subtitle"))

    scan_col, manual_col = st.columns(2)
    with scan_col:
        st.subheader(t("home.scanTitle"))
        st.write(t("home.scanDesc"))
    with manual_col:
        st.subheader(t("home.manualTitle"))
        st.write(t("home.manualDesc"))

    for i, (title_key, desc_key) in enumerate(STEPS, start=1):
        st.markdown(f"**{i}. {t('home.' + title_key)}** {t('home.' + desc_key)}")


def render_scan():
    st.header(t("scan.title"))
    st.caption(t("scan.subtitle"))
    st.file_uploader(
        t("scan.dropHint"),
        type=["jpg", "jpeg", "png", "webp", "pdf"],
        key="scan_upload",
    )


def render_manual():
    st.header(t("manual.title"))
    st.caption(t("manual.subtitle"))
    st.text_input(
        t("manual.setTitle"),
        placeholder=t("manual.setTitlePlaceholder"),
        key="set_title",
    )
    questions = st.session_state.get("questions", [])
    if questions:
        st.write(t("set.questions", n=len(questions)))
    else:
        st.info(t("manual.empty"))


def main():
    st.set_page_config(page_title=t("nav.home"), layout="wide")
    view = render_topbar()
    if view == "scan":
        render_scan()
    elif view == "manual":
        render_manual()
    else:
        render_home()


if __name__ == "__main__":
    main()
