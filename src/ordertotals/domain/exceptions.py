"""Domain-level exceptions.

Hard failures of a batch run are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """One or more loaded records violated a business rule."""


class RecordLoadError(DomainException):
    """An input file could not be turned into records."""
