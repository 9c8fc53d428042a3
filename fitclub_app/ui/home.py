# fitclub_app/ui/home.py

import streamlit as st
from fitclub_app.services.api import get_config, list_challenges, list_workouts


def home_page():
    user = st.session_state.get("user", {})
    first_name = (user.get("name") or "").split(" ")[0]
    st.title(f"Welcome, {first_name}")

    config = get_config()
    if isinstance(config, dict) and not config.get("error") and config.get("home_banner"):
        st.image(config["home_banner"], use_container_width=True)
        if config.get("motivational_quote"):
            st.markdown(f"*\"{config['motivational_quote']}\"*")

    workouts = list_workouts(st.session_state["token"])
    if isinstance(workouts, dict) and workouts.get("error"):
        st.error(workouts["error"])
        return

    st.subheader("Today's workouts")
    for workout in workouts[:3]:
        st.markdown(f"**{workout['type']} · {workout['name']}** · {workout.get('duration') or ''}")


def challenges_page():
    st.title("Challenges")

    challenges = list_challenges(st.session_state["token"])
    if isinstance(challenges, dict) and challenges.get("error"):
        st.error(challenges["error"])
        return

    for challenge in challenges:
        with st.container(border=True):
            if challenge.get("image_url"):
                st.image(challenge["image_url"], use_container_width=True)
            st.markdown(f"### {challenge['title']}")
            st.write(challenge.get("description") or "")
            if challenge.get("duration_days"):
                st.caption(f"{challenge['duration_days']} days")
