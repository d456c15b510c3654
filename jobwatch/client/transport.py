import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from jobwatch.client.errors import BackendError, ProtocolError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_HEADERS = {"Content-Type": "application/json"}


async def fetch_json(
    http: httpx.AsyncClient,
    method: str,
    path: str,
    payload: Any = None,
    expect_body: bool = True,
) -> Any:
    """Send one request to the backend and return the decoded JSON body.

    A non-2xx status raises BackendError carrying the response text, or the
    reason phrase when the body is empty. With ``expect_body`` off the body of
    a successful response is not inspected.
    """
    content = json.dumps(payload) if payload is not None else None
    try:
        response = await http.request(method, path, content=content, headers=JSON_HEADERS)
    except httpx.HTTPError as exc:
        logger.warning("%s %s failed: %s", method, path, exc)
        raise TransportError(str(exc) or exc.__class__.__name__) from exc

    if not response.is_success:
        message = response.text.strip() or response.reason_phrase or f"HTTP {response.status_code}"
        logger.warning("%s %s returned %d: %s", method, path, response.status_code, message)
        raise BackendError(message, response.status_code)

    if not expect_body:
        return None

    try:
        return response.json()
    except ValueError as exc:
        raise ProtocolError(f"Response from {path} is not valid JSON") from exc


def parse_model(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(part) for part in first["loc"]) or model.__name__
        raise ProtocolError(f"Unexpected response shape at {where}: {first['msg']}") from exc
