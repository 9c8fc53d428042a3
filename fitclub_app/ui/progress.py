# fitclub_app/ui/progress.py

from datetime import datetime, timezone
import streamlit as st
from fitclub_app.services.api import add_water, list_progress, record_weight


GLASS_ML = 300
DAILY_GOAL_ML = 3000


def progress_page():
    st.title("Progress")
    token = st.session_state["token"]

    rows = list_progress(token)
    if isinstance(rows, dict) and rows.get("error"):
        st.error(rows["error"])
        return

    today = datetime.now(timezone.utc).date().isoformat()
    today_ml = next((r["water_intake"] for r in rows if r["date"] == today), 0)
    st.subheader("Water intake")
    st.progress(min(today_ml / DAILY_GOAL_ML, 1.0), text=f"{today_ml / 1000:.1f}L / {DAILY_GOAL_ML / 1000:.1f}L")

    if st.button(f"+ {GLASS_ML} ml"):
        add_water(token, GLASS_ML)
        st.rerun()

    with st.form("weight_form"):
        weight = st.number_input("Weight (kg)", min_value=0.0, step=0.1)
        if st.form_submit_button("Save weight") and weight > 0:
            result = record_weight(token, weight)
            if isinstance(result, dict) and result.get("error"):
                st.error(result["error"])
            else:
                st.rerun()

    if rows:
        st.subheader("History")
        st.dataframe(
            [{"date": r["date"], "water (ml)": r["water_intake"], "weight": r["weight"]} for r in rows],
            use_container_width=True,
        )
