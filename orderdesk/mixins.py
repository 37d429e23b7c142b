import logging

from asgiref.sync import sync_to_async
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from orderdesk.exceptions import (
    DuplicateTableNo,
    FieldsRequired,
    InvalidOrderData,
    NoOrdersFound,
    OrderIdRequired,
)
from orderdesk.models import Order
from orderdesk.serializers import (
    OrderSerializer,
    OrderUpdateSerializer,
    OrderWriteSerializer,
    require_fields,
)
from orderdesk.settings import order_settings
from orderdesk.shortcuts import aget_order_or_400, aget_usernames, asave_order

logger = logging.getLogger(__name__)


async def avalidate(serializer):
    """Run `serializer` validation, reporting failures as `InvalidOrderData`."""
    try:
        await sync_to_async(serializer.is_valid)(raise_exception=True)
    except ValidationError as exc:
        raise InvalidOrderData(errors=exc.detail)
    return serializer.validated_data


async def acheck_table_no(table_no, exclude_pk=None):
    """Raise `DuplicateTableNo` if another order already sits at `table_no`."""
    duplicate = await Order.objects.filter(table_no=table_no).only("pk").afirst()
    if duplicate is not None and duplicate.pk != exclude_pk:
        raise DuplicateTableNo


class ListOrdersMixin:
    """
    List every order along with its owner's username.
    """

    async def alist(self, request, *args, **kwargs):
        orders = [order async for order in Order.objects.all()]

        if not orders and order_settings.EMPTY_LIST_IS_ERROR:
            raise NoOrdersFound

        usernames = await aget_usernames(order.user_id for order in orders)
        serializer = OrderSerializer(
            orders, many=True, context={"request": request, "usernames": usernames}
        )
        return Response(serializer.data, status=status.HTTP_200_OK)


class CreateOrderMixin:
    """
    Create an order for a free table.
    """

    async def acreate(self, request, *args, **kwargs):
        require_fields(request.data, ("user", "tableNo", "ordertext"))

        serializer = OrderWriteSerializer(data=request.data)
        validated_data = await avalidate(serializer)

        await acheck_table_no(validated_data["table_no"])
        order = await self.perform_acreate(validated_data)

        if order.pk is None:
            raise InvalidOrderData
        logger.info("Created order %s for table %s", order.pk, order.table_no)
        return Response(
            {"message": "New order created"}, status=status.HTTP_201_CREATED
        )

    async def perform_acreate(self, validated_data):
        return await asave_order(Order(**validated_data), force_insert=True)


class UpdateOrderMixin:
    """
    Replace every mutable field of an order.
    """

    async def aupdate(self, request, *args, **kwargs):
        data = request.data
        require_fields(data, ("id", "user", "tableNo", "ordertext"))
        if not isinstance(data.get("completed"), bool):
            raise FieldsRequired

        serializer = OrderUpdateSerializer(data=data)
        validated_data = await avalidate(serializer)

        order = await aget_order_or_400(Order, pk=data["id"])
        await acheck_table_no(validated_data["table_no"], exclude_pk=order.pk)
        order = await self.perform_aupdate(order, validated_data)

        logger.info("Updated order %s at table %s", order.pk, order.table_no)
        return Response(f"'{order.table_no}' updated", status=status.HTTP_200_OK)

    async def perform_aupdate(self, order, validated_data):
        for attr, value in validated_data.items():
            setattr(order, attr, value)
        return await asave_order(order)


class DestroyOrderMixin:
    """
    Delete an order.
    """

    async def adestroy(self, request, *args, **kwargs):
        data = request.data
        if not hasattr(data, "get") or not data.get("id"):
            raise OrderIdRequired

        order = await aget_order_or_400(Order, pk=data["id"])
        # `delete()` clears the primary key on the instance.
        pk, table_no = order.pk, order.table_no
        await self.perform_adestroy(order)

        logger.info("Deleted order %s at table %s", pk, table_no)
        return Response(
            f"Order '{table_no}' with ID {pk} deleted", status=status.HTTP_200_OK
        )

    async def perform_adestroy(self, order):
        await order.adelete()
