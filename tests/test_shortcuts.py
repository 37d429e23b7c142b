from django.contrib.auth.models import User
from django.test import TestCase

from orderdesk.exceptions import DuplicateTableNo, OrderNotFound
from orderdesk.models import Order
from orderdesk.shortcuts import aget_order_or_400, aget_usernames, asave_order


class TestAGetOrder(TestCase):
    async def test_aget_order_or_400_not_a_model_raises(self):
        with self.assertRaises(ValueError):
            await aget_order_or_400(None, pk=1)

    async def test_aget_order_or_400_raises(self):
        with self.assertRaises(OrderNotFound):
            await aget_order_or_400(Order, pk=1)

    async def test_aget_order_or_400_bad_type_raises(self):
        with self.assertRaises(OrderNotFound):
            await aget_order_or_400(Order, pk="not-a-pk")

    async def test_aget_order_or_400_boolean_pk_raises(self):
        user = await User.objects.acreate(username="test")
        await Order.objects.acreate(user=user, table_no=1, ordertext="soup")
        for lookup in ({"pk": True}, {"id": True}):
            with self.assertRaises(OrderNotFound):
                await aget_order_or_400(Order, **lookup)

    async def test_aget_order_or_400_with_queryset_succeeds(self):
        user = await User.objects.acreate(username="test")
        order = await Order.objects.acreate(user=user, table_no=1, ordertext="soup")
        obj = await aget_order_or_400(Order.objects.all(), pk=order.pk)
        assert order == obj


class TestASaveOrder(TestCase):
    async def test_asave_order_succeeds(self):
        order = await asave_order(Order(user_id=1, table_no=3, ordertext="soup"))
        assert order.pk is not None
        assert await Order.objects.acount() == 1

    async def test_asave_order_duplicate_table_raises(self):
        await Order.objects.acreate(user_id=1, table_no=3, ordertext="soup")
        with self.assertRaises(DuplicateTableNo):
            await asave_order(Order(user_id=2, table_no=3, ordertext="tea"))
        assert await Order.objects.acount() == 1


class TestAGetUsernames(TestCase):
    async def test_no_ids(self):
        assert await aget_usernames([]) == {}

    async def test_usernames(self):
        alice = await User.objects.acreate(username="alice")
        bob = await User.objects.acreate(username="bob")
        usernames = await aget_usernames([alice.pk, bob.pk, alice.pk, 999])
        assert usernames == {alice.pk: "alice", bob.pk: "bob"}
