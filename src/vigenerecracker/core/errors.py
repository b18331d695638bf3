from __future__ import annotations


class CrackError(ValueError):
    """Base class for inputs the cracker cannot recover a key from."""


class EmptyInputError(CrackError):
    """Normalized text is empty or shorter than the smallest window."""


class NoRepeatsFoundError(CrackError):
    """No sequence repeats often enough to give a key length."""


class DegenerateKeyLengthError(CrackError):
    """GCD of the gaps is 0 or longer than the text itself."""

    def __init__(self, key_length: int, text_length: int) -> None:
        self.key_length = key_length
        self.text_length = text_length
        super().__init__(
            f"Degenerate key length {key_length} for {text_length} characters of text."
        )
