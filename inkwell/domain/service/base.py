"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span entities, such as
    threading, moderation and the commenter ledger.
    """

    pass
