"""Client and user identifiers for collect hits.

client_id anonymously identifies a device or session and should be a random
UUID (version 4, RFC 4122). user_id is the identifier of a visitor as known
to the caller and may be absent. Both are percent-encoded here so they can be
embedded in a query string as-is.
"""
from __future__ import annotations

import uuid
from urllib.parse import quote

from galogger.models import Identity


def escape(value) -> str:
    """Percent-encode everything outside the RFC 3986 unreserved set."""
    return quote(str(value), safe="")


def set_client_id(client_id: str | None = None) -> str:
    """Return the escaped client id, generating a UUID4 when none is given."""
    if client_id is None:
        client_id = str(uuid.uuid4())
    return escape(client_id)


def set_user_id(user_id: str | None = None, client_id: str | None = None) -> Identity:
    """Build an Identity for user_id.

    client_id is the id already active for the session; a fresh one is
    generated when it is None.
    """
    if user_id is not None:
        user_id = escape(user_id)
    if client_id is None:
        client_id = set_client_id()
    return Identity(client_id=client_id, user_id=user_id)


init_user = set_user_id
