from typing import Any, Dict

from litestar import Controller, get, post, delete
from litestar.exceptions import NotFoundException

from shopzap.api.litestar.requests import ContextRequest, parse_request
from shopzap.utils import to_thread


class CheckoutController(Controller):
    path = '/checkout'
    tags = ["Checkout"]

    @post('/{session_id:str}/context', summary="Preserve context")
    async def preserve_context(
        self,
        session_id: str,
        data: Dict[str, Any],
        api: Any
    ) -> Dict[str, Any]:
        """
        Preserve context resolves the store of `path` and keeps it as the
        store of the checkout session, replacing any earlier store.
        """
        request = parse_request(ContextRequest, data)
        route = await to_thread(api.resolver.resolve_path)(request.path)

        context = await to_thread(
            api.checkout_session(session_id).preserve_context
        )(
            store=route.store,
            path=request.path
        )
        return context.dict()

    @get('/{session_id:str}/context', summary="Get context")
    async def get_context(self, session_id: str, api: Any) -> Dict[str, Any]:
        """
        Get context returns the store preserved for the checkout session
        while it has not expired.
        """
        context = await to_thread(
            api.checkout_session(session_id).get_context
        )()
        if context is None:
            raise NotFoundException(
                detail=f"No store context for session {session_id}"
            )
        return context.dict()

    @delete('/{session_id:str}/context', summary="Clear context")
    async def clear_context(self, session_id: str, api: Any) -> None:
        await to_thread(api.checkout_session(session_id).clear)()
