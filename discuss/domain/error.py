"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ThreadDepthExceededError(DomainError):
    """Raised when a reply tree is deeper than the configured limit.

    Deep or cyclic parent_id chains abort the whole operation; nothing is
    partially deleted.
    """

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Reply tree exceeds maximum depth of {max_depth}")
