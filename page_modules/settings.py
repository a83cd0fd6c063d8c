"""Settings page. Nothing here persists; saving only logs the submitted values."""
import logging

import streamlit as st

from core import mock_data
from core.store import Store

logger = logging.getLogger(__name__)

TIMEZONES = ["America/New_York", "America/Los_Angeles", "Europe/London", "Asia/Tokyo"]
CURRENCIES = {"USD": "USD ($)", "EUR": "EUR (€)", "GBP": "GBP (£)", "JPY": "JPY (¥)"}
DATE_FORMATS = ["MM/DD/YYYY", "DD/MM/YYYY", "YYYY/MM/DD"]
LANGUAGES = ["English", "Spanish", "French", "German"]

PLACEHOLDER_TABS = ["Profile", "Users & Permissions", "Security", "Billing", "Notifications",
                    "Integrations", "Database"]


def _index(options, value):
    options = list(options)
    return options.index(value) if value in options else 0


def _render_general():
    defaults = mock_data.SETTINGS_DEFAULTS
    with st.form("settings_general"):
        st.subheader("Business Information")
        col1, col2 = st.columns(2)
        business_name = col1.text_input("Business Name", value=defaults["business_name"])
        business_email = col2.text_input("Business Email", value=defaults["business_email"])
        business_phone = col1.text_input("Business Phone", value=defaults["business_phone"])
        business_address = col2.text_input("Business Address", value=defaults["business_address"])

        st.subheader("Regional Settings")
        col1, col2 = st.columns(2)
        timezone = col1.selectbox("Timezone", TIMEZONES, index=_index(TIMEZONES, defaults["timezone"]),
                                  format_func=lambda tz: tz.replace("_", " "))
        currency = col2.selectbox("Currency", list(CURRENCIES), index=_index(CURRENCIES, defaults["currency"]),
                                  format_func=CURRENCIES.get)
        date_format = col1.selectbox("Date Format", DATE_FORMATS,
                                     index=_index(DATE_FORMATS, defaults["date_format"]))
        language = col2.selectbox("Language", LANGUAGES, index=_index(LANGUAGES, defaults["language"]))

        st.subheader("System Preferences")
        dark_mode = st.toggle("Dark Mode", value=defaults["dark_mode"],
                              help="Enable dark mode for the application")
        notifications = st.toggle("Email Notifications", value=defaults["notifications"],
                                  help="Receive email notifications for important events")
        auto_logout = st.toggle("Auto Logout", value=defaults["auto_logout"],
                                help="Automatically log out after period of inactivity")

        if st.form_submit_button("\U0001F4BE Save Changes", type="primary"):
            values = {
                "business_name": business_name,
                "business_email": business_email,
                "business_phone": business_phone,
                "business_address": business_address,
                "timezone": timezone,
                "currency": currency,
                "date_format": date_format,
                "language": language,
                "dark_mode": dark_mode,
                "notifications": notifications,
                "auto_logout": auto_logout,
            }
            logger.info("Settings submitted: %s", values)
            st.toast("Settings saved", icon="✅")


def render(store: Store):
    """Render the settings page."""
    st.header("⚙️ Settings")
    st.caption("Manage your system preferences and configurations.")
    tabs = st.tabs(["General"] + PLACEHOLDER_TABS)
    with tabs[0]:
        _render_general()
    for tab, label in zip(tabs[1:], PLACEHOLDER_TABS):
        with tab:
            st.info(f"{label} settings are coming soon.")
