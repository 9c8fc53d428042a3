# fitclub_app/ui/profile.py

import streamlit as st
from fitclub_app.services.api import update_profile
from fitclub_app.ui.login import update_session_user


LANGUAGES = {"pt": "Português", "en": "English", "es": "Español"}


def profile_page():
    user = st.session_state.get("user", {})

    if user.get("photo_url"):
        st.image(user["photo_url"], width=96)
    st.title(user.get("name") or "")
    st.caption(user.get("email") or "")

    current = user.get("language") or "pt"
    language = st.selectbox(
        "Language",
        options=list(LANGUAGES),
        index=list(LANGUAGES).index(current) if current in LANGUAGES else 0,
        format_func=LANGUAGES.get,
    )

    with st.form("profile_form"):
        goal = st.text_input("Goal", value=user.get("goal") or "")
        weight = st.number_input("Weight (kg)", min_value=0.0, value=float(user.get("weight") or 0), step=0.1)
        height = st.number_input("Height (cm)", min_value=0.0, value=float(user.get("height") or 0), step=1.0)
        submitted = st.form_submit_button("Save")

    if submitted or language != current:
        fields = {"language": language, "goal": goal or None}
        if weight > 0:
            fields["weight"] = weight
        if height > 0:
            fields["height"] = height

        result = update_profile(st.session_state["token"], **fields)
        if isinstance(result, dict) and result.get("error"):
            st.error(result["error"])
        else:
            update_session_user(result)
            st.success("Profile updated.")
