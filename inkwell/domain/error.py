"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ThreadDepthExceededError(ValidationError):
    """Raised when replying to a comment that already sits at the depth cap."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum thread depth of {max_depth} levels reached")


class InvalidModerationActionError(ValidationError):
    """Raised when a moderation action is neither approve nor hide."""

    def __init__(self, action: str):
        self.action = action
        super().__init__('Invalid action. Must be "approve" or "hide"')


class NotLikedError(ValidationError):
    """Raised when removing a like that does not exist."""

    def __init__(self) -> None:
        super().__init__("You have not liked this comment")


class AuthenticationRequiredError(DomainError):
    """Raised when an operation needs an active, authenticated user."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own or moderate."""

    def __init__(self, message: str):
        super().__init__(message)


class CommentsDisabledError(NotAuthorizedError):
    """Raised when a post has comments turned off."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Comments are disabled for this post")


class ConflictError(DomainError):
    """Raised when a uniqueness rule would be violated."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")
