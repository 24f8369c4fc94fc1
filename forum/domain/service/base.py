"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules of one bounded area and keep no
    state between requests; everything they need is read from repositories.
    """

    pass
