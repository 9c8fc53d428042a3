# fitclub_app/ui/admin.py

import streamlit as st
from fitclub_app.services.api import delete_workout, get_config, get_stats, list_workouts, set_config


def admin_page():
    st.title("Admin")
    token = st.session_state["token"]

    stats = get_stats(token)
    if isinstance(stats, dict) and stats.get("error"):
        st.error(stats["error"])
        return

    col1, col2 = st.columns(2)
    col1.metric("Users", stats.get("users", 0))
    col2.metric("Workouts", stats.get("workouts", 0))

    config = get_config()
    if not isinstance(config, dict) or config.get("error"):
        config = {}

    with st.form("config_form"):
        banner = st.text_input("Home banner URL", value=config.get("home_banner", ""))
        quote = st.text_area("Motivational quote", value=config.get("motivational_quote", ""))
        submitted = st.form_submit_button("Save")

    if submitted:
        set_config(token, "home_banner", banner)
        set_config(token, "motivational_quote", quote)
        st.success("Configuration saved.")

    st.subheader("Workouts")
    workouts = list_workouts(token)
    if isinstance(workouts, dict) and workouts.get("error"):
        st.error(workouts["error"])
        return

    for workout in workouts:
        col_name, col_action = st.columns([4, 1])
        col_name.write(f"{workout['type']} · {workout['name']}")
        if col_action.button("Delete", key=f"delete_{workout['id']}"):
            delete_workout(token, workout["id"])
            st.rerun()
