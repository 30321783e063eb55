"""Convenience exports for service layer."""
from .auth_service import (
    authenticate_user,
    create_access_token,
    decode_access_token,
    get_current_user,
    get_optional_user,
    hash_password,
    normalize_email,
    signup_user,
    verify_password,
)
from .post_service import create_post_record, list_post_records

__all__ = [
    "authenticate_user",
    "create_access_token",
    "create_post_record",
    "decode_access_token",
    "get_current_user",
    "get_optional_user",
    "hash_password",
    "list_post_records",
    "normalize_email",
    "signup_user",
    "verify_password",
]
