from django.apps import AppConfig


class OrderDeskConfig(AppConfig):
    name = "orderdesk"
    verbose_name = "Order desk"
    default_auto_field = "django.db.models.BigAutoField"
