class InvalidArgumentError(ValueError):
    """Raised when a node can't be inserted as given."""


class FormatError(ValueError):
    """Raised when encoded tree text doesn't match the grammar."""
