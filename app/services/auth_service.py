import logging
from typing import Optional

from fastapi import Cookie, Depends, Query
from jose import JWTError

from ..errors import Forbidden, Unauthenticated
from ..utils import decode_token

logger = logging.getLogger(__name__)


def get_current_user(token: Optional[str] = Cookie(default=None)) -> dict:
    """Resolve the identity claims carried by the ``token`` cookie."""
    if not token:
        raise Unauthenticated()
    try:
        payload = decode_token(token)
    except JWTError as e:
        logger.debug("Rejected token: %s", e)
        raise Unauthenticated()
    return payload


def verify_email(
    email: Optional[str] = Query(default=None),
    user: dict = Depends(get_current_user),
) -> dict:
    """
    Every protected route repeats the identity check against ``?email=``.
    A valid token for another address is still forbidden.
    """
    if user.get("email") != email:
        raise Forbidden()
    return user
