"""
presigner: HMAC-SHA256 signatures for presigned, expiring API requests.

Signs the canonical string ``METHOD\\nPATH\\nEXPIRES`` with a shared secret
so the result can be pasted into a query string or request header.
"""

from presigner.signer import (
    SignedRequest,
    Signer,
    canonical_string,
    expires_in,
    presign,
    sign,
    sign_checked,
    validate_request,
)

__version__ = "1.0.0"

__all__ = [
    "SignedRequest",
    "Signer",
    "canonical_string",
    "expires_in",
    "presign",
    "sign",
    "sign_checked",
    "validate_request",
]
