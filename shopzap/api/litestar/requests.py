from typing import Any, Dict, Optional

from pydantic.v1 import BaseModel, ValidationError, validator

from litestar.exceptions import ValidationException

from shopzap.models import ResolvedRoute
from shopzap.routing import (
    build_store_url, extract_store_identifier, rewrite_legacy_path
)


class ContextRequest(BaseModel):
    path: str

    @validator('path')
    def validate_store_path(cls, value):
        if extract_store_identifier(value) is None:
            raise ValueError(
                "Path should look like '/store/<identifier>/...'"
            )
        return value


def parse_request(model, data: Any):
    try:
        return model.parse_obj(data)
    except ValidationError as e:
        raise ValidationException(
            detail="Invalid request body",
            extra=[
                {"loc": list(error["loc"]), "msg": error["msg"]}
                for error in e.errors()
            ]
        )


def route_response(
    route: ResolvedRoute,
    origin: Optional[str] = None,
    path: Optional[str] = None
) -> Dict[str, Any]:
    data = route.dict()
    data["canonical_url"] = build_store_url(route.store, origin=origin)

    if path is not None:
        data["redirect_path"] = (
            rewrite_legacy_path(path, route.store)
            if route.redirect_needed
            else None
        )
    return data
