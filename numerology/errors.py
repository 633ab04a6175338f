"""
Exceptions raised by the numerology engine.
"""


class NumerologyError(Exception):
    """Base class for every error the engine raises."""


class InvalidInputError(NumerologyError, ValueError):
    """Malformed birth date or a name that yields no usable letters."""


class CollaboratorUnavailable(NumerologyError):
    """
    An external text enricher failed (network error, rate limit, empty reply).

    Only enricher implementations raise this; the enrichment boundary always
    catches it and falls back to static templates.
    """
