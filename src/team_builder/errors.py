"""Errors raised while configuring a balancing run."""


class InvalidConfigurationError(ValueError):
    """Raised for an unusable team count, seed or delimiter."""


class MissingArgumentError(Exception):
    """Raised when a required command-line option is absent."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            "the following arguments are required: " + ", ".join(self.missing)
        )
