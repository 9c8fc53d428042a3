# fitclub_app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from fitclub_app.services.api import login_user, register_user
from fitclub_app.services.session import SessionStore

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")
if not COOKIE_PASSWORD:
    raise RuntimeError("COOKIE_PASSWORD is not set.")

cookies = EncryptedCookieManager(prefix="fitclub/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()

store = SessionStore(cookies)


def restore_session():
    """
    Loads a saved session into st.session_state without contacting the server.
    """
    if "token" in st.session_state:
        return
    saved = store.restore()
    if saved:
        token, user = saved
        st.session_state["token"] = token
        st.session_state["user"] = user


def start_session(token, user):
    store.save(token, user)
    st.session_state["token"] = token
    st.session_state["user"] = user


def update_session_user(user):
    store.update_user(user)
    st.session_state["user"] = user


def logout():
    store.clear()
    st.session_state.clear()


def login_page():
    st.title("KEL FITCLUB")
    st.caption("Premium Fitness Experience")

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in")

    if submitted:
        with st.spinner("Signing in..."):
            result = login_user(email, password)
        if not isinstance(result, dict) or result.get("error") or not result.get("token"):
            message = result.get("error") if isinstance(result, dict) else None
            st.error(message or "Authentication failed")
        else:
            start_session(result["token"], result["user"])
            st.rerun()

    if st.button("Create account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("Create account")

    with st.form("register_form"):
        name = st.text_input("Name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Register")

    if submitted:
        with st.spinner("Creating account..."):
            result = register_user(email, password, name)
        if not isinstance(result, dict) or result.get("error") or not result.get("token"):
            message = result.get("error") if isinstance(result, dict) else None
            st.error(message or "Registration failed")
        else:
            start_session(result["token"], result["user"])
            st.session_state["show_register"] = False
            st.rerun()

    if st.button("Back to sign in"):
        st.session_state["show_register"] = False
        st.rerun()
