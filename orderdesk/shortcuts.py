import logging

from asgiref.sync import sync_to_async
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.shortcuts import _get_queryset

from orderdesk.exceptions import DuplicateTableNo, OrderNotFound

logger = logging.getLogger(__name__)


async def aget_order_or_400(klass, *args, **kwargs):
    """
    Same as `aget_object_or_404()`, but raises `OrderNotFound` instead of
    `Http404`, including when the lookup values don't match the
    required types or a boolean is given as the primary key.
    """
    queryset = _get_queryset(klass)
    if not hasattr(queryset, "aget"):
        klass__name = (
            klass.__name__ if isinstance(klass, type) else klass.__class__.__name__
        )
        raise ValueError(
            "First argument to aget_order_or_400() must be a Model, Manager, or "
            f"QuerySet, not '{klass__name}'."
        )
    # JSON booleans would otherwise be cast to the primary keys 0 and 1.
    if any(
        isinstance(value, bool)
        for key, value in kwargs.items()
        if key in ("pk", "id")
    ):
        raise OrderNotFound
    try:
        return await queryset.aget(*args, **kwargs)
    except (queryset.model.DoesNotExist, TypeError, ValueError, ValidationError):
        raise OrderNotFound


def _save_order(order, **kwargs):
    try:
        with transaction.atomic():
            order.save(**kwargs)
    except IntegrityError as exc:
        logger.warning(
            "Table %s was taken while saving order %s", order.table_no, order.pk
        )
        raise DuplicateTableNo from exc
    return order


async def asave_order(order, **kwargs):
    """
    Saves `order`, turning a unique table number violation raised by the
    database into `DuplicateTableNo`.
    """
    return await sync_to_async(_save_order)(order, **kwargs)


async def aget_usernames(user_ids):
    """
    Maps each of `user_ids` to its username with a single query.
    Ids without a matching user are left out.
    """
    user_ids = set(user_ids)
    if not user_ids:
        return {}
    User = get_user_model()
    rows = User._default_manager.filter(pk__in=user_ids).values_list(
        "pk", User.USERNAME_FIELD
    )
    return {pk: username async for pk, username in rows}
