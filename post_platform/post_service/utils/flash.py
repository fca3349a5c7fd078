"""
One-shot flash messages carried in a cookie across a redirect.
"""
import base64
import binascii
import json
import logging
from typing import Optional

from fastapi import Request, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from ..schemas import FlashData

logger = logging.getLogger(__name__)

FLASH_COOKIE_NAME = "_flash"


def encode_flash(data: FlashData) -> str:
    """Wrap the message as {"_": data} and make it cookie-safe."""
    raw = json.dumps({"_": data.model_dump()}, separators=(",", ":"))
    # Unpadded, so the value never needs cookie quoting
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")


def decode_flash(value: Optional[str]) -> Optional[FlashData]:
    if not value:
        return None
    try:
        padded = value + "=" * (-len(value) % 4)
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        return FlashData.model_validate(json.loads(raw)["_"])
    except (binascii.Error, UnicodeError, ValueError, KeyError, TypeError, ValidationError) as e:
        logger.debug("Ignoring malformed flash cookie: %s", e)
        return None


def get_flash(request: Request) -> Optional[FlashData]:
    return decode_flash(request.cookies.get(FLASH_COOKIE_NAME))


def flash_redirect(data: FlashData, url: str = "/") -> RedirectResponse:
    """Redirect with 303 See Other and leave the message for the next page."""
    response = RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(FLASH_COOKIE_NAME, encode_flash(data), path="/", httponly=True)
    return response
