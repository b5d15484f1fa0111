"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an action needs a signed-in user and there is none."""

    def __init__(self, message: str = "Authentication required."):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommentValidationError(DomainError):
    """Raised when a comment submission fails validation.

    Carries field-keyed messages so the interface layer can report them
    next to the offending inputs.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid comment submission: {fields}")
