from typing import Any, Dict, Sequence

from .models import FIELD_KINDS, Product, ProductIn, required_message

BODY_NOT_OBJECT = "Request body must be a JSON object"
BODY_NOT_JSON = "Request body must be valid JSON"


def request_error_message(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Turn FastAPI request validation errors into one client-facing message.

    Only the first error is reported; body fields are validated in
    declaration order, so that is the first failing field.
    """
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    kind = first.get("type")
    msg = first.get("msg", "invalid value")

    if loc[:1] == ["body"]:
        if kind == "json_invalid":
            return BODY_NOT_JSON
        if len(loc) == 1:
            return BODY_NOT_OBJECT
        if kind == "missing" and loc[1] in FIELD_KINDS:
            return required_message(loc[1])
        return msg

    where = loc[0] if loc else "request"
    name = ".".join(loc[1:]) or where
    return f"Invalid {where} parameter '{name}': {msg}"


def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    return Product(id=product_id, **p.model_dump()).model_dump(by_alias=True)
