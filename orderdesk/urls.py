from django.urls import path

from orderdesk.views import OrderView

app_name = "orderdesk"

urlpatterns = [
    path("orders", OrderView.as_view(), name="orders"),
]
