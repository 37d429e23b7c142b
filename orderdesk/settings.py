"""
Settings for orderdesk are all namespaced in the ORDERDESK setting.
For example your project's `settings.py` file might look like this:

ORDERDESK = {
    "EMPTY_LIST_IS_ERROR": False,
}

This module provides the `order_settings` object, that is used to access
orderdesk settings, checking for user settings first, then falling
back to the defaults.
"""
from django.conf import settings
from django.core.signals import setting_changed
from rest_framework.settings import APISettings

DEFAULTS = {
    # Listing an empty table of orders answers 400 "No orders found"
    # instead of an empty array.
    "EMPTY_LIST_IS_ERROR": True,
}


class OrderSettings(APISettings):
    @property
    def user_settings(self):
        if not hasattr(self, "_user_settings"):
            self._user_settings = getattr(settings, "ORDERDESK", {})
        return self._user_settings


order_settings = OrderSettings(None, DEFAULTS)


def reload_order_settings(*args, **kwargs):
    if kwargs["setting"] == "ORDERDESK":
        order_settings.reload()


setting_changed.connect(reload_order_settings)
