"""
Error taxonomy for totpgen.

Both errors are recoverable: a bad secret is fixed by supplying a new one and
recomputing. Neither is ever fatal to the process.
"""


class TotpError(ValueError):
    """Base class for failures raised while deriving a one-time code."""


class InvalidSecret(TotpError):
    """The secret is not valid Base32 or does not describe whole bytes."""


class HashFailure(TotpError):
    """The HMAC primitive rejected the key or message."""
