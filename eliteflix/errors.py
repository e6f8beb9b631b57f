"""
Error taxonomy for the storefront services.

Services raise these; route handlers catch them and turn them into a flash
message plus a redirect or a re-rendered form.
"""


class EliteflixError(Exception):
    """Base class for every failure a route handler is expected to handle."""


class ValidationError(EliteflixError):
    """One or more required fields are missing."""

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__('Missing required fields: ' + ', '.join(self.fields))


class BadCredentials(EliteflixError):
    """Wrong password for an existing account."""


class AccountNotFound(BadCredentials):
    """No account with that email for the requested role."""


class DuplicateOrInvalid(EliteflixError):
    """An account could not be created."""


class DuplicateEmail(DuplicateOrInvalid):
    """The email is already registered."""


class StoreError(EliteflixError):
    """Unexpected persistence failure."""
