from typing import Any, Dict, Optional

from litestar import Controller, get
from litestar.exceptions import ValidationException
from litestar.params import Parameter

from shopzap.api.litestar.requests import route_response
from shopzap.utils import to_thread


class StoreController(Controller):
    path = '/store'
    tags = ["Store"]

    @get('/{identifier:str}', summary="Resolve")
    async def resolve_store(self, identifier: str, api: Any) -> Dict[str, Any]:
        """
        Resolve will find the store for a username or a legacy store name.

        `redirect_needed` is set when the identifier is not the canonical
        username, in which case clients should move to `canonical_url`.
        """
        route = await to_thread(api.resolver.resolve)(identifier)
        return route_response(route, origin=api.origin)


@get('/route', summary="Route")
async def resolve_route(
    api: Any,
    url_path: Optional[str] = Parameter(query="path", default=None),
    host: Optional[str] = Parameter(query="host", default=None),
) -> Dict[str, Any]:
    """
    Route resolves the store of a full store path or a subdomain host.

    For paths the rewritten `redirect_path` is returned whenever the path
    used a legacy identifier.
    """
    if url_path is not None:
        route = await to_thread(api.resolver.resolve_path)(url_path)
        return route_response(route, origin=api.origin, path=url_path)

    if host is not None:
        route = await to_thread(api.resolver.resolve_host)(host)
        return route_response(route, origin=api.origin)

    raise ValidationException(
        detail="Either 'path' or 'host' query parameter is required"
    )
