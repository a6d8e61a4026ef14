"""Custom exceptions for biome map generation."""


class BeforeHumansError(Exception):
    """Base exception for biome map errors."""

    pass


class ReferenceDataError(BeforeHumansError):
    """Raised when static reference data is malformed."""

    pass


class GenerationError(BeforeHumansError):
    """Raised when a generation run fails as a whole.

    No partial output accompanies this error; the caller keeps whatever
    state it had before the run.
    """

    def __init__(self, seed: int, message: str):
        self.seed = seed
        super().__init__(f"Generation failed for seed {seed}: {message}")
