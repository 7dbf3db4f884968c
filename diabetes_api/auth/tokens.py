"""
Bearer Tokens

A token is the session claim ``{userId, username, role, timestamp}`` as
compact JSON, base64 encoded. There is no server-side session: the claim is
decoded again on every request and expires 24 hours after ``timestamp``.

The plain encoding carries no integrity protection, so anyone can build a
token for any username. It is kept as the default for compatibility with
existing clients. When a secret key is passed the same claim is signed with
it through itsdangerous and tampered tokens fail to decode.
"""

import base64
import json
import logging
import math
import time
from dataclasses import dataclass

from itsdangerous import BadSignature, URLSafeSerializer

logger = logging.getLogger(__name__)

MAX_TOKEN_AGE_MS = 24 * 60 * 60 * 1000
ADMIN_ROLE = 'admin'
SIGNING_SALT = 'session-token'


@dataclass(frozen=True)
class SessionClaim:
    user_id: int
    username: str
    role: str
    timestamp: int

    def to_dict(self):
        return {
            'userId': self.user_id,
            'username': self.username,
            'role': self.role,
            'timestamp': self.timestamp,
        }

    def age_ms(self, now_ms):
        return now_ms - self.timestamp


def now_ms():
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def _serializer(secret_key):
    return URLSafeSerializer(secret_key, salt=SIGNING_SALT)


def issue_token(user_id, username, now=None, secret_key=None):
    """Build a fresh admin claim for ``username`` and encode it.

    ``now`` is a callable returning epoch milliseconds. When ``secret_key``
    is given the token is signed.
    """
    issued_at = (now or now_ms)()
    claim = SessionClaim(user_id=user_id or 0, username=username, role=ADMIN_ROLE, timestamp=issued_at)
    if secret_key:
        return _serializer(secret_key).dumps(claim.to_dict())
    raw = json.dumps(claim.to_dict(), separators=(',', ':'))
    return base64.b64encode(raw.encode('utf-8')).decode('ascii')


def _claim_from_payload(payload):
    if not isinstance(payload, dict):
        return None
    username = payload.get('username')
    role = payload.get('role')
    timestamp = payload.get('timestamp')
    user_id = payload.get('userId', 0)
    if not isinstance(username, str) or not isinstance(role, str):
        return None
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        return None
    # also rejects integers too large for a float
    if not math.isfinite(float(timestamp)):
        return None
    if isinstance(user_id, bool) or not isinstance(user_id, (int, float)):
        return None
    if isinstance(user_id, float):
        if not user_id.is_integer():
            return None
        user_id = int(user_id)
    return SessionClaim(user_id=user_id, username=username, role=role, timestamp=timestamp)


def _load_payload(token, secret_key):
    if secret_key:
        return _serializer(secret_key).loads(token)
    raw = base64.b64decode(token, validate=True)
    return json.loads(raw.decode('utf-8'))


def decode_token(token, now=None, secret_key=None, max_age_ms=MAX_TOKEN_AGE_MS):
    """Return the ``SessionClaim`` inside ``token``, or None.

    None covers every failure: undecodable token, bad signature, a payload
    that is not a claim, and a claim older than ``max_age_ms``. A claim
    exactly ``max_age_ms`` old is still valid.
    """
    if not isinstance(token, str) or not token:
        return None
    try:
        claim = _claim_from_payload(_load_payload(token, secret_key))
    except (BadSignature, ValueError, TypeError, OverflowError, RecursionError) as e:
        logger.debug('Token verification error: %s', e)
        return None

    if claim is None:
        logger.debug('Token payload is not a session claim')
        return None
    if claim.age_ms((now or now_ms)()) > max_age_ms:
        return None
    return claim
