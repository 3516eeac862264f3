"""Error taxonomy. Each error carries the envelope code it maps to."""


class JavkitError(Exception):
    code: int = 500


class ValidationError(JavkitError):
    """Required input missing; raised before any network call."""

    code = 400


class NotFoundError(JavkitError):
    """Well-formed search that produced no items."""

    code = 404


class TransportError(JavkitError):
    """Network failure or non-2xx origin response.

    404, DNS failure and timeouts all collapse into this one kind.
    """

    code = 500
