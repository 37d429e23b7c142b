from django.conf import settings
from django.db import models


class Order(models.Model):
    # Orders only reference their owner by id; the user row is not
    # required to exist when the order is written.
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="orders",
    )
    table_no = models.PositiveIntegerField(unique=True)
    ordertext = models.TextField()
    completed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("id",)

    def __str__(self):
        return f"Order {self.pk} (table {self.table_no})"
