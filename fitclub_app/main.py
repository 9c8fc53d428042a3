# fitclub_app/main.py

import streamlit as st
from dotenv import load_dotenv
from fitclub_app.ui.login import login_page, logout, restore_session
from fitclub_app.ui.home import challenges_page, home_page
from fitclub_app.ui.workouts import workouts_page
from fitclub_app.ui.progress import progress_page
from fitclub_app.ui.profile import profile_page
from fitclub_app.ui.admin import admin_page


load_dotenv()


PAGES = {
    "home": ("Home", home_page),
    "workouts": ("Workouts", workouts_page),
    "challenges": ("Challenges", challenges_page),
    "progress": ("Progress", progress_page),
    "profile": ("Profile", profile_page),
}


def main_page():
    user = st.session_state.get("user", {})

    st.sidebar.markdown("## Menu")
    for key, (label, _) in PAGES.items():
        if st.sidebar.button(label, key=f"nav_{key}"):
            st.session_state["page"] = key
    if user.get("role") == "admin" and st.sidebar.button("Admin"):
        st.session_state["page"] = "admin"
    if st.sidebar.button("Sign out"):
        logout()
        st.rerun()

    page = st.session_state.get("page", "home")
    if page == "admin" and user.get("role") == "admin":
        admin_page()
    else:
        PAGES.get(page, PAGES["home"])[1]()


restore_session()

if "token" not in st.session_state:
    login_page()
else:
    main_page()
