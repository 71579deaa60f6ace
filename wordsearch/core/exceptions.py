"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class InvalidConfiguration(WordSearchError):
    """Raised when the grid size or word list cannot produce a puzzle."""


class PlacementFailure(WordSearchError):
    """Raised when a word has no feasible placement on the grid."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Could not place word: {word}")
        self.word = word


class InvalidGrid(WordSearchError):
    """Raised when an imported grid or placement registry is rejected."""
