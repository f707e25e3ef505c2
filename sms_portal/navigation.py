"""
Navigation module for role-based page routing using st.navigation
"""
from collections import OrderedDict

import streamlit as st

from sms_portal import config
from sms_portal.schemas.user import Role

# Page definitions with metadata - mapping page ids to page configs
PAGE_CONFIGS = {
    "dashboard": {
        "file": "app_pages/dashboard.py",
        "label": "Dashboard",
        "icon": "🏠",
    },
    "account": {
        "file": "app_pages/account.py",
        "label": "Account",
        "icon": "👤",
    },
    "departments": {
        "file": "app_pages/departments.py",
        "label": "Departments",
        "icon": "🏛️",
    },
    "degrees": {
        "file": "app_pages/degrees.py",
        "label": "Degrees",
        "icon": "🎓",
    },
    "users": {
        "file": "app_pages/users.py",
        "label": "Users",
        "icon": "👥",
    },
    "programmes": {
        "file": "app_pages/programmes.py",
        "label": "Programmes",
        "icon": "📚",
    },
    "batches": {
        "file": "app_pages/batches.py",
        "label": "Batches",
        "icon": "🗂️",
    },
    "faculty": {
        "file": "app_pages/faculty.py",
        "label": "Faculty",
        "icon": "🧑‍🏫",
    },
}

GENERAL_SECTION = ("General", ["dashboard", "account"])

# Role-keyed menu tree: (section title, page ids)
ROLE_SECTIONS = {
    Role.ADMIN: ("Administration", ["departments", "degrees", "users"]),
    Role.HOD: ("Department Management", ["programmes", "batches", "faculty"]),
    Role.STAFF: ("Academic Management", ["programmes", "batches"]),
    Role.FACULTY: ("Academics", ["programmes", "batches"]),
    Role.STUDENT: ("Academics", ["programmes", "batches"]),
}


def menu_for_role(role) -> "OrderedDict[str, list]":
    """
    Section title -> page ids for the given role.
    Every role gets the General section; unknown roles get nothing else.
    """
    menu = OrderedDict()
    title, page_ids = GENERAL_SECTION
    menu[title] = list(page_ids)

    parsed = Role.parse(role)
    if parsed in ROLE_SECTIONS:
        title, page_ids = ROLE_SECTIONS[parsed]
        menu[title] = list(page_ids)

    return menu


def pages_for_role(role) -> list:
    """Flat list of page ids reachable by a role, in menu order."""
    return [page_id for page_ids in menu_for_role(role).values() for page_id in page_ids]


def render_sidebar_header(role: str) -> None:
    with st.sidebar:
        st.markdown(f"### 🎓 {config.UNIVERSITY_NAME}")
        st.caption(role or "Guest")


def setup_navigation(role: str):
    """
    Setup role-based navigation and return the navigation object
    """
    sections = {}
    for title, page_ids in menu_for_role(role).items():
        sections[title] = [
            st.Page(
                PAGE_CONFIGS[page_id]["file"],
                title=PAGE_CONFIGS[page_id]["label"],
                icon=PAGE_CONFIGS[page_id]["icon"],
                default=page_id == "dashboard",
            )
            for page_id in page_ids
        ]

    render_sidebar_header(role)
    return st.navigation(sections)
