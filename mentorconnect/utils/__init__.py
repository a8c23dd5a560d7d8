__all__ = [
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "create_reset_token",
    "verify_reset_token",
    "reset_token_is_current",
    "authenticate_user",
    "get_current_user",
    "get_optional_user",
    "oauth2_scheme",
    "is_email_enabled",
    "send_email",
    "send_password_reset_email",
]

_SECURITY_NAMES = {
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "create_reset_token",
    "verify_reset_token",
    "reset_token_is_current",
    "authenticate_user",
    "get_current_user",
    "get_optional_user",
    "oauth2_scheme",
}
_EMAIL_NAMES = {"is_email_enabled", "send_email", "send_password_reset_email"}


def __getattr__(name):
    if name in _SECURITY_NAMES:
        from . import security as _security
        return getattr(_security, name)
    if name in _EMAIL_NAMES:
        from . import email as _email
        return getattr(_email, name)
    raise AttributeError(f"module 'mentorconnect.utils' has no attribute '{name}'")
