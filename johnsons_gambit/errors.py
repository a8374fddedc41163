class GambitError(Exception):
    """Base class for Johnson's Gambit errors."""


class InputError(GambitError):
    """Raised when form input is rejected before any game logic runs."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RoundInputError(InputError):
    """Raised when a Monty round submission has no pick or a bad wager."""


class GateValidationError(InputError):
    """Raised when the SG1 name or ZIP checks fail."""


class ConfigError(GambitError):
    """Raised when a config file or environment value cannot be used."""
