from django.db import connection
from rest_framework import serializers

from orderdesk.exceptions import FieldsRequired
from orderdesk.models import Order


def require_fields(data, fields):
    """
    Raise `FieldsRequired` unless every one of `fields` is present in
    `data` with a truthy value. `0` and `""` count as missing.
    """
    if not hasattr(data, "get") or not all(data.get(field) for field in fields):
        raise FieldsRequired


def column_max_value(model_field):
    """
    Largest value the database column behind `model_field` can hold.
    """
    _, max_value = connection.ops.integer_field_range(model_field.get_internal_type())
    return max_value


class StrictBooleanField(serializers.BooleanField):
    """
    A boolean field that only accepts real booleans, not "true", 1 or "on".
    """

    def to_internal_value(self, data):
        if isinstance(data, bool):
            return data
        self.fail("invalid", input=data)


class OrderSerializer(serializers.ModelSerializer):
    tableNo = serializers.IntegerField(source="table_no", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    username = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = (
            "id",
            "user",
            "tableNo",
            "ordertext",
            "completed",
            "createdAt",
            "updatedAt",
            "username",
        )

    def get_username(self, order):
        usernames = self.context.get("usernames")
        if usernames is None:
            return None
        return usernames.get(order.user_id)


class OrderWriteSerializer(serializers.Serializer):
    user = serializers.IntegerField(
        source="user_id",
        min_value=1,
        max_value=column_max_value(Order._meta.get_field("user").target_field),
    )
    tableNo = serializers.IntegerField(
        source="table_no",
        min_value=1,
        max_value=column_max_value(Order._meta.get_field("table_no")),
    )
    ordertext = serializers.CharField(trim_whitespace=False)


class OrderUpdateSerializer(OrderWriteSerializer):
    completed = StrictBooleanField()
