"""Storage errors."""


class PersistenceUnavailable(Exception):
    """The store could not be read or written."""
