# Run from project root: streamlit run app/ui.py
# Alternative chat client: talks to the backend API (POST /chat). No history is kept on the server.

import requests
import streamlit as st

from app.core.config import API_BASE

st.title("Ask about Roshan's resume")

try:
    r = requests.get(f"{API_BASE}/health", timeout=10)
    if not r.ok:
        st.caption("Backend returned an error on /health.")
except requests.RequestException:
    st.caption("Backend not reachable; start the API first.")

if "messages" not in st.session_state:
    st.session_state.messages = []
if st.button("Clear", key="clear_chat"):
    st.session_state.messages = []
    st.rerun()

# Previous messages (local display only)
for msg in st.session_state.messages:
    with st.chat_message(msg["role"]):
        st.markdown(msg["content"])

if prompt := st.chat_input("Ask about email, experience, skills, projects or certifications"):
    st.session_state.messages.append({"role": "user", "content": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)
    with st.chat_message("assistant"):
        placeholder = st.empty()
        placeholder.caption("Thinking...")
        try:
            r = requests.post(f"{API_BASE}/chat", json={"message": prompt}, timeout=90)
            data = r.json() if r.headers.get("content-type", "").startswith("application/json") else {}
            if r.ok:
                answer = data.get("response", "") or "No answer."
                placeholder.markdown(answer)
            else:
                answer = data.get("error") or f"Error: {r.status_code}"
                placeholder.error(answer)
        except requests.RequestException as e:
            answer = f"Connection failed: {e}"
            placeholder.error(answer)
    st.session_state.messages.append({"role": "assistant", "content": answer})
