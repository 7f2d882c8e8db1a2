# =============================================================================
# lib/body_parser.py - Content-Type Aware Body Decoding
# =============================================================================
# Decodes a request body into a Pydantic model, picking the decoder from the
# Content-Type header:
#
#   application/json (and any "+json" type)    -> JSON object keys
#   application/x-www-form-urlencoded          -> form fields
#   multipart/form-data                        -> text form fields
#   application/xml, text/xml (and "+xml")     -> child elements of the root
#
# Usage:
#   from lib.body_parser import parse_body
#
#   @router.post("/register")
#   async def register(request: Request):
#       payload = await parse_body(request, RegisterRequest)
# =============================================================================

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, TypeVar
from urllib.parse import parse_qsl

from fastapi import Request
from pydantic import BaseModel, ValidationError

from app.exceptions import BodyParseError, UnsupportedMediaTypeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SUPPORTED_MEDIA_TYPES = [
    "application/json",
    "application/x-www-form-urlencoded",
    "multipart/form-data",
    "application/xml",
]


def media_type_of(content_type: str | None) -> str:
    """
    Strip parameters from a Content-Type header.

    Example:
        media_type_of("multipart/form-data; boundary=x")  # "multipart/form-data"
    """
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def xml_to_dict(body: bytes) -> dict[str, str]:
    """
    Flatten an XML document into {child tag: child text}.

    The root element's name is ignored, so <RegisterRequest>, <user> or any
    other wrapper works. Namespace prefixes are dropped from child tags.
    Nested elements beyond the first level are ignored.
    """
    root = ET.fromstring(body)
    return {_local_name(child.tag): (child.text or "").strip() for child in root}


def _local_name(tag: str) -> str:
    """Drop an ElementTree "{namespace}" prefix from a tag."""
    return tag.rsplit("}", 1)[-1]


def _decode(media_type: str, body: bytes) -> dict[str, Any] | None:
    """Decode a non-multipart body into a plain dict, or None if unsupported."""
    if media_type.endswith("x-www-form-urlencoded"):
        # Also accepts the bare "x-www-form-urlencoded" spelling
        return dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))

    if media_type.endswith("/xml") or media_type.endswith("+xml"):
        return xml_to_dict(body)

    return None


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    """
    Decode the request body into `model` based on its Content-Type.

    Args:
        request: Incoming request
        model: Pydantic model class to validate into

    Returns:
        A validated model instance

    Raises:
        UnsupportedMediaTypeError: No decoder for the Content-Type
        BodyParseError: Body is malformed or fails validation
    """
    content_type = request.headers.get("content-type", "")
    media_type = media_type_of(content_type)

    logger.debug(f"Parsing {media_type or 'untyped'} body into {model.__name__}")

    try:
        if media_type == "multipart/form-data":
            form = await request.form()
            # Uploaded files are skipped; only text fields map onto the model
            fields = {key: value for key, value in form.items() if isinstance(value, str)}
            return model.model_validate(fields)

        body = await request.body()

        if media_type.endswith("/json") or media_type.endswith("+json"):
            return model.model_validate_json(body)

        fields = _decode(media_type, body)

    except (ValidationError, ET.ParseError, UnicodeDecodeError) as e:
        raise BodyParseError(media_type, str(e)) from e

    if fields is None:
        raise UnsupportedMediaTypeError(content_type, SUPPORTED_MEDIA_TYPES)

    try:
        return model.model_validate(fields)
    except ValidationError as e:
        raise BodyParseError(media_type, str(e)) from e


async def form_value(request: Request, name: str) -> str | None:
    """
    Read a single form field from the body, whatever the HTTP method.

    Returns None when the body is not a form or the field is absent.
    """
    media_type = media_type_of(request.headers.get("content-type"))

    if media_type == "multipart/form-data":
        value = (await request.form()).get(name)
        return value if isinstance(value, str) else None

    if media_type.endswith("x-www-form-urlencoded"):
        try:
            fields = dict(parse_qsl((await request.body()).decode("utf-8"), keep_blank_values=True))
        except UnicodeDecodeError as e:
            raise BodyParseError(media_type, str(e)) from e
        return fields.get(name)

    return None
