class RepairError(Exception):
    """Raised when a fix request fails."""


class InputError(RepairError):
    """Raised when the serialized error report cannot be decoded."""


class CollaboratorError(RepairError):
    """Raised when the inference provider rejects the request or returns an unusable reply."""


class CollaboratorNetworkError(CollaboratorError):
    """Raised when the inference provider call fails due to network/infrastructure issues."""
