# fitclub_app/ui/workouts.py

import streamlit as st
from fitclub_app.services.api import list_exercises, list_workouts, record_workout


def workouts_page():
    st.title("Workouts")
    token = st.session_state["token"]

    workouts = list_workouts(token)
    if isinstance(workouts, dict) and workouts.get("error"):
        st.error(workouts["error"])
        return
    if not workouts:
        st.info("No workouts available yet.")
        return

    category = st.radio("Category", options=["Gym", "Home"], horizontal=True)
    filtered = [w for w in workouts if w.get("category") == category]

    for workout in filtered:
        with st.expander(f"{workout['type']} · {workout['name']}"):
            st.caption(f"{workout.get('duration') or ''} · {workout.get('series') or ''}")
            if workout.get("video_url"):
                st.video(workout["video_url"])
            st.write(workout.get("description") or "")
            if workout.get("tips"):
                st.info(workout["tips"])

            show_exercises(token, workout["id"])

            if st.button("Mark as done", key=f"done_{workout['id']}"):
                result = record_workout(token, workout["id"])
                if isinstance(result, dict) and result.get("error"):
                    st.error(result["error"])
                else:
                    st.success("Workout saved.")


def show_exercises(token, workout_id):
    exercises = list_exercises(token, workout_id)
    if isinstance(exercises, dict) and exercises.get("error"):
        st.error(exercises["error"])
        return

    for exercise in exercises:
        st.markdown(f"**{exercise['name']}**")
        if exercise.get("description"):
            st.write(exercise["description"])
        if exercise.get("tips"):
            st.caption(exercise["tips"])
