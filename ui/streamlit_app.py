# Role: Streamlit front end for the trainer.
# - Backend is authoritative (engine state lives in the API process).
# - Sidebar shows the mission objectives; main panel is chat, then the email form.

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import requests
import streamlit as st

BACKEND_URL = "http://127.0.0.1:8000"

# Replies are paced server-side; poll until the counterpart stops "typing".
POLL_INTERVAL_SECONDS = 0.4
POLL_MAX_SECONDS = 8.0


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "snapshot" not in st.session_state:
        st.session_state["snapshot"] = None
    if "feedback" not in st.session_state:
        st.session_state["feedback"] = None
    if "busy" not in st.session_state:
        st.session_state["busy"] = False


# ----------------------------
# Backend calls
# ----------------------------
def fetch_snapshot() -> Optional[Dict[str, Any]]:
    try:
        r = requests.get(f"{BACKEND_URL}/state", timeout=10)
        if r.status_code != 200:
            return None
        return r.json()
    except requests.RequestException:
        return None


def wait_for_reply() -> Optional[Dict[str, Any]]:
    deadline = time.monotonic() + POLL_MAX_SECONDS
    snap = fetch_snapshot()
    while snap and snap.get("composing") and time.monotonic() < deadline:
        time.sleep(POLL_INTERVAL_SECONDS)
        snap = fetch_snapshot()
    return snap


def send_text(text: str) -> None:
    resp = requests.post(f"{BACKEND_URL}/chat", json={"text": text}, timeout=30)
    resp.raise_for_status()


def new_scenario() -> None:
    resp = requests.post(f"{BACKEND_URL}/scenario/new", json={}, timeout=30)
    resp.raise_for_status()


def send_email(subject: str, body: str) -> Optional[Dict[str, Any]]:
    resp = requests.post(f"{BACKEND_URL}/email", json={"subject": subject, "body": body}, timeout=30)
    if resp.status_code == 409:
        return None
    resp.raise_for_status()
    return resp.json()


# ----------------------------
# Sidebar: objectives + restart
# ----------------------------
def render_sidebar(snap: Dict[str, Any]) -> None:
    st.sidebar.title("Mission Objectives")
    st.sidebar.caption(f"{snap['scenario_name']} · {snap['counterpart_name']}")

    if st.sidebar.button("↻ New Scenario", use_container_width=True, disabled=st.session_state["busy"]):
        new_scenario()
        st.session_state["feedback"] = None
        st.session_state["snapshot"] = wait_for_reply()
        st.rerun()

    st.sidebar.divider()
    for item in snap["checklist"]:
        mark = "✅" if item["completed"] else "⬜"
        st.sidebar.markdown(f"{mark} {item['description']}")

    task = snap["email_task"]
    st.sidebar.divider()
    st.sidebar.markdown(f"**Email task:** {task['instruction']}")
    st.sidebar.caption(f"Subject idea: {task['subject_hint']}")


# ----------------------------
# Chat
# ----------------------------
def render_chat(snap: Dict[str, Any]) -> None:
    for msg in snap["messages"]:
        role = "user" if msg["role"] == "user" else "assistant"
        with st.chat_message(role):
            if msg.get("sender"):
                st.caption(msg["sender"])
            if msg["role"] == "system":
                st.info(msg["text"])
            else:
                st.markdown(msg["text"])

    if snap["suggestions"]:
        cols = st.columns(len(snap["suggestions"]))
        for col, suggestion in zip(cols, snap["suggestions"]):
            if col.button(suggestion, key=f"sugg-{suggestion}", disabled=st.session_state["busy"]):
                submit_chat(suggestion)

    user_input = st.chat_input("Type your reply…", disabled=st.session_state["busy"])
    if user_input:
        submit_chat(user_input)


def submit_chat(text: str) -> None:
    st.session_state["busy"] = True
    try:
        send_text(text)
        with st.spinner("Typing..."):
            st.session_state["snapshot"] = wait_for_reply()
    except requests.RequestException:
        st.error("I couldn’t reach the backend. Make sure the API is running on http://127.0.0.1:8000.")
    finally:
        st.session_state["busy"] = False
    st.rerun()


# ----------------------------
# Email
# ----------------------------
def render_email(snap: Dict[str, Any]) -> None:
    task = snap["email_task"]
    st.subheader(f"Email to {snap['counterpart_name']}")
    st.caption(task["instruction"])

    with st.form("email"):
        subject = st.text_input("Subject", placeholder=task["subject_hint"])
        body = st.text_area("Message", height=240)
        sent = st.form_submit_button("Send")

    if sent:
        try:
            st.session_state["feedback"] = send_email(subject, body)
        except requests.RequestException:
            st.error("I couldn’t reach the backend. Make sure the API is running on http://127.0.0.1:8000.")
            return
        st.session_state["snapshot"] = fetch_snapshot()

    feedback = st.session_state.get("feedback")
    if feedback is None:
        return
    if feedback["is_valid"]:
        st.success("Email accepted. Scenario complete!")
    else:
        for err in feedback["errors"]:
            st.warning(err)


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="CMPL Paint Shop Simulation", page_icon="🎨", layout="wide")
    st.title("CMPL Paint Shop Simulation")
    st.caption("Role: Darek (Deputy Manager) | Context: BYD Repairs")

    ensure_session()
    if st.session_state["snapshot"] is None:
        st.session_state["snapshot"] = wait_for_reply()

    snap = st.session_state["snapshot"]
    if not snap:
        st.error("Backend is not reachable. Start it with: uvicorn trainer.main:app")
        return

    render_sidebar(snap)
    if snap.get("banner"):
        st.info(snap["banner"])

    if snap["phase"] in {"EMAIL", "COMPLETE"}:
        render_email(snap)
    else:
        render_chat(snap)


if __name__ == "__main__":
    main()
