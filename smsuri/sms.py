"""Validates sms: URIs (RFC 5724, for text messaging).

Numbers are normalized so that they only include digits, optionally with a
leading plus for international numbers.

RFC 5724 carries the message text in the query: sms:number?body=message.
The form sms:number&body=message is common on the web as well, so a body
embedded in the path is accepted too. Both forms go through sanitize_body
before being written back.
"""

from __future__ import annotations

import re
from urllib.parse import unquote

from .logging import get_logger
from .phone import normalize_phone
from .scheme import URIScheme
from .uri import URI

logger = get_logger(__name__)

PATH_BODY_MARKER = "&body="
QUERY_BODY_PREFIX = "body="

_STRIPPED_CHARS_RE = re.compile(r"[<>\"']")
_DENIED_WORDS_RE = re.compile(r"script|alert|javascript", re.IGNORECASE)


def sanitize_body(body: str) -> str:
    """Strip markup and script-like content from an SMS body.

    Deletes the characters < > " ' and then every case-insensitive
    occurrence of "script", "alert" and "javascript". This is a blunt
    denylist, not an encoder: ampersands and everything else pass through.

    Word removal repeats until nothing matches, since removing one word can
    join its neighbours into another ("scrscriptipt" -> "script").
    """
    sanitized = _STRIPPED_CHARS_RE.sub("", body)
    while True:
        sanitized, count = _DENIED_WORDS_RE.subn("", sanitized)
        if not count:
            return sanitized


class SmsScheme(URIScheme):
    """Handler for sms: URIs.

    Never rejects a URI: anything malformed normalizes down to an empty path
    with no query.
    """

    name = "sms"
    browsable = False
    may_omit_host = True

    def do_validate(self, uri: URI) -> bool:
        uri.userinfo = None
        uri.host = None
        uri.port = None

        path = unquote(uri.path)
        path_body = None
        if PATH_BODY_MARKER in path:
            phone, _, raw_body = path.partition(PATH_BODY_MARKER)
            phone = normalize_phone(phone)
            path_body = sanitize_body(raw_body)
            uri.path = f"{phone}{PATH_BODY_MARKER}{path_body}" if path_body else phone
        else:
            uri.path = normalize_phone(path)

        query_body = None
        if uri.query is not None and uri.query.startswith(QUERY_BODY_PREFIX):
            query_body = sanitize_body(uri.query[len(QUERY_BODY_PREFIX) :])
            uri.query = f"{QUERY_BODY_PREFIX}{query_body}" if query_body else None

        logger.debug(
            "Normalized sms URI",
            number_length=len(uri.path.partition(PATH_BODY_MARKER)[0]),
            path_body_chars=None if path_body is None else len(path_body),
            query_body_chars=None if query_body is None else len(query_body),
        )
        return True
