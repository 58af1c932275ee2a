import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

EMPTY_OBJECT = "{}"
EMPTY_ARRAY = "[]"


def dump_document(value: Any, empty: str = EMPTY_OBJECT) -> str:
    if value is None:
        return empty
    try:
        return json.dumps(value)
    except (TypeError, ValueError) as ex:
        logger.warning("Could not serialize JSON document, storing %s instead: %s", empty, ex)
        return empty


def dump_optional_document(value: Any, empty: str = EMPTY_OBJECT) -> str | None:
    if value is None:
        return None
    return dump_document(value, empty)


def load_document(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except ValueError:
        return value
