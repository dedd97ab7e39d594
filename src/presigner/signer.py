"""HMAC signing for presigned, expiring requests."""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass

from presigner.common.errors import ErrorCode, InvalidArgument
from presigner.common.logging import get_logger
from presigner.common.settings import Settings

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 3600

SecretKey = bytes | str


def _key_bytes(secret_key: SecretKey) -> bytes:
    if isinstance(secret_key, str):
        return secret_key.encode("utf-8")
    return bytes(secret_key)


def canonical_string(method: str, path: str, expires_at: int) -> str:
    """Build the newline-joined string that gets signed."""
    return f"{method}\n{path}\n{int(expires_at)}"


def sign(secret_key: SecretKey, method: str, path: str, expires_at: int) -> str:
    """
    Create a hex-encoded HMAC-SHA256 signature for a request.

    Fields are joined verbatim. A newline inside ``method`` or ``path`` makes
    the field boundaries ambiguous, e.g. ``("POST\\n/a", "3600")`` and
    ``("POST", "/a\\n3600")`` sign the same bytes for the same expiry. Use
    :func:`sign_checked` when either field can be influenced by someone else.

    Args:
        secret_key: Shared secret; ``str`` keys are UTF-8 encoded
        method: HTTP method, exact case the verifier will use
        path: Request path including any query string
        expires_at: Absolute expiry in unix seconds

    Returns:
        64 lowercase hex characters
    """
    message = canonical_string(method, path, expires_at).encode("utf-8")
    return hmac.new(_key_bytes(secret_key), message, hashlib.sha256).hexdigest()


def validate_request(secret_key: SecretKey, method: str, path: str) -> None:
    """Reject inputs that would produce a weak or ambiguous signature."""
    if not secret_key:
        raise InvalidArgument("Secret key must not be empty", code=ErrorCode.MISSING_SECRET)
    if "\n" in method:
        raise InvalidArgument("Method must not contain a newline")
    if "\n" in path:
        raise InvalidArgument("Path must not contain a newline")


def sign_checked(secret_key: SecretKey, method: str, path: str, expires_at: int) -> str:
    """Validate inputs, then sign."""
    validate_request(secret_key, method, path)
    return sign(secret_key, method, path, expires_at)


def expires_in(ttl_seconds: int, now: float | None = None) -> int:
    """Get the unix timestamp ``ttl_seconds`` from ``now``."""
    if ttl_seconds <= 0:
        raise InvalidArgument(f"TTL must be positive, got {ttl_seconds}")
    if now is None:
        now = time.time()
    return int(now) + int(ttl_seconds)


@dataclass(frozen=True)
class SignedRequest:
    """A request together with its expiry and signature."""

    method: str
    path: str
    expires_at: int
    signature: str

    def as_headers(
        self,
        signature_header: str = "X-Signature",
        expires_header: str = "X-Expires",
    ) -> dict[str, str]:
        return {
            signature_header: self.signature,
            expires_header: str(self.expires_at),
        }

    def as_query(
        self,
        signature_param: str = "signature",
        expires_param: str = "expires",
    ) -> str:
        """Append expiry and signature to the signed path's query string."""
        base, hash_mark, fragment = self.path.partition("#")
        separator = "&" if "?" in base else "?"
        return (
            f"{base}{separator}{expires_param}={self.expires_at}"
            f"&{signature_param}={self.signature}{hash_mark}{fragment}"
        )


def presign(
    secret_key: SecretKey,
    method: str,
    path: str,
    expires_at: int | None = None,
    ttl_seconds: int = DEFAULT_TTL_SECONDS,
    now: float | None = None,
) -> SignedRequest:
    """
    Sign a request that stays valid until ``expires_at``.

    When ``expires_at`` is omitted it is computed as ``now + ttl_seconds``.

    Raises:
        InvalidArgument: If the key is empty, a field contains a newline,
            or the TTL is not positive
    """
    if expires_at is None:
        expires_at = expires_in(ttl_seconds, now)

    signature = sign_checked(secret_key, method, path, expires_at)
    logger.debug("Presigned request", method=method, path=path, expires_at=expires_at)
    return SignedRequest(
        method=method,
        path=path,
        expires_at=int(expires_at),
        signature=signature,
    )


class Signer:
    """Signs requests with one secret key."""

    def __init__(self, secret_key: SecretKey, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        if not secret_key:
            raise InvalidArgument("Secret key must not be empty", code=ErrorCode.MISSING_SECRET)
        if ttl_seconds <= 0:
            raise InvalidArgument(f"TTL must be positive, got {ttl_seconds}")
        self._secret_key = _key_bytes(secret_key)
        self._ttl_seconds = ttl_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> Signer:
        """Build a signer from configured secret and TTL."""
        key = settings.secret_key_bytes
        if not key:
            raise InvalidArgument(
                "No secret key configured (set PRESIGNER_SECRET_KEY)",
                code=ErrorCode.MISSING_SECRET,
            )
        return cls(key, ttl_seconds=settings.default_ttl_seconds)

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def sign(self, method: str, path: str, expires_at: int) -> str:
        return sign_checked(self._secret_key, method, path, expires_at)

    def presign(
        self,
        method: str,
        path: str,
        expires_at: int | None = None,
        ttl_seconds: int | None = None,
        now: float | None = None,
    ) -> SignedRequest:
        return presign(
            self._secret_key,
            method,
            path,
            expires_at=expires_at,
            ttl_seconds=ttl_seconds if ttl_seconds is not None else self._ttl_seconds,
            now=now,
        )

    def __repr__(self) -> str:
        return f"Signer(ttl_seconds={self._ttl_seconds})"
