"""
找不到頁面 (404)
"""
import streamlit as st

from services.auth_service import AuthService
from services.data_store import DataStore
from utils.session_manager import session_manager


def render(store: DataStore, auth: AuthService):
    st.title("404")
    st.write("Oops! Page not found")
    st.caption(f"`{session_manager.current_path()}` does not exist.")

    if st.button("🏠 Return to Home", type="primary"):
        session_manager.navigate(auth.home_path())
