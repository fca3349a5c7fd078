import base64

from post_platform.post_service.schemas import FlashData
from post_platform.post_service.utils.flash import decode_flash, encode_flash, flash_redirect


def test_encoded_flash_wraps_message():
    value = encode_flash(FlashData(kind="success", message="Post successfully added"))
    assert "=" not in value
    raw = base64.urlsafe_b64decode(value + "=" * (-len(value) % 4)).decode("utf-8")
    assert raw == '{"_":{"kind":"success","message":"Post successfully added"}}'
    assert decode_flash(value) == FlashData(kind="success", message="Post successfully added")


def test_decode_ignores_missing_or_malformed_values():
    assert decode_flash(None) is None
    assert decode_flash("") is None
    assert decode_flash("not base64 at all!") is None
    assert decode_flash(base64.urlsafe_b64encode(b"[1, 2]").decode()) is None
    assert decode_flash(base64.urlsafe_b64encode(b'{"_": {"kind": "info"}}').decode()) is None


def test_flash_redirect():
    response = flash_redirect(FlashData(message="done"))
    assert response.status_code == 303
    assert response.headers["location"] == "/"
    assert response.headers["set-cookie"].startswith("_flash=")
    assert "Path=/" in response.headers["set-cookie"]
