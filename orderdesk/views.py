from adrf.views import APIView

from orderdesk import mixins
from orderdesk.exceptions import exception_handler


class OrderView(
    mixins.ListOrdersMixin,
    mixins.CreateOrderMixin,
    mixins.UpdateOrderMixin,
    mixins.DestroyOrderMixin,
    APIView,
):
    """
    Orders endpoint. Every verb except GET identifies the order through
    the request body rather than the URL.
    """

    http_method_names = ["get", "post", "patch", "delete", "options"]

    def get_exception_handler(self):
        return exception_handler

    async def get(self, request, *args, **kwargs):
        return await self.alist(request, *args, **kwargs)

    async def post(self, request, *args, **kwargs):
        return await self.acreate(request, *args, **kwargs)

    async def patch(self, request, *args, **kwargs):
        return await self.aupdate(request, *args, **kwargs)

    async def delete(self, request, *args, **kwargs):
        return await self.adestroy(request, *args, **kwargs)
