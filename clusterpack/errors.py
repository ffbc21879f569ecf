class ConfigurationError(ValueError):
    """A required layout setting (width, height or size function) is missing."""


class InvalidInputError(ValueError):
    """The hierarchy data or the layout area cannot be laid out."""
