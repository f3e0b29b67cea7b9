"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold repositories and settings handed in by the container and
    are built once per request; they keep no state between calls.
    """
