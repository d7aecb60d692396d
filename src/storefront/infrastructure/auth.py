"""Store sign-in.

Every process signs in once before touching the store, either with a
configured token or anonymously. The resulting session only scopes
store access to one app's collections; shoppers and merchants never see
it.
"""

from __future__ import annotations

import hashlib
import logging
import re
import uuid
from dataclasses import dataclass
from pathlib import Path

from storefront.infrastructure.errors import AuthError

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9._~+/=-]+")
_APP_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]+")


@dataclass(frozen=True)
class Session:
    user_id: str
    app_id: str
    anonymous: bool

    def collections_dir(self, data_dir: Path) -> Path:
        """Directory holding the public collections this session may use."""
        return data_dir / "artifacts" / self.app_id / "public" / "data"


def sign_in(app_id: str, token: str | None = None) -> Session:
    """Open a session for *app_id*.

    With a token the user id is derived from it, so the same token always
    maps to the same user. Without one a fresh anonymous id is issued.
    """
    if not app_id or not app_id.strip():
        raise AuthError("An app id is required to sign in")
    if not _APP_ID_PATTERN.fullmatch(app_id) or app_id in (".", ".."):
        raise AuthError(f"Invalid app id {app_id!r}: use letters, digits, '.', '_' and '-' only")

    if token is None:
        session = Session(user_id=f"anon-{uuid.uuid4().hex[:12]}", app_id=app_id, anonymous=True)
        logger.debug("Signed in anonymously as %s", session.user_id)
        return session

    token = token.strip()
    if not token or not _TOKEN_PATTERN.fullmatch(token):
        logger.error("Sign-in rejected: malformed auth token")
        raise AuthError("Auth token is malformed")

    digest = hashlib.sha256(f"{app_id}:{token}".encode("utf-8")).hexdigest()
    session = Session(user_id=f"user-{digest[:12]}", app_id=app_id, anonymous=False)
    logger.debug("Signed in with token as %s", session.user_id)
    return session
