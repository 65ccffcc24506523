"""
Extraction of the ``linear-gradient(...)`` body and its parameter tokens.

Splitting is purely textual: ``rgba(255, 0, 0, 1)`` becomes four tokens and
is regrouped by the parser through :meth:`TokenStream.consume_many`.
"""
from typing import List, Sequence, Tuple

from .constants import LINEAR_GRADIENT_PREFIX, LINEAR_GRADIENT_POSTFIX, PARAMETER_SEPARATOR
from .errors import GradientStructureError, MalformedTokenError


def extract_gradient_body(text: str) -> str:
    """
    Return the text between ``linear-gradient(`` and the first following ``);``.

    Raises:
        GradientStructureError: if either marker is missing
    """
    prefix_index = text.find(LINEAR_GRADIENT_PREFIX)
    if prefix_index < 0:
        raise GradientStructureError(f"Missing {LINEAR_GRADIENT_PREFIX!r} in {text!r}")

    start = prefix_index + len(LINEAR_GRADIENT_PREFIX)
    end = text.find(LINEAR_GRADIENT_POSTFIX, start)
    if end < 0:
        raise GradientStructureError(f"Missing {LINEAR_GRADIENT_POSTFIX!r} after {LINEAR_GRADIENT_PREFIX!r} in {text!r}")

    return text[start:end]


def split_parameters(body: str) -> List[str]:
    return body.split(PARAMETER_SEPARATOR)


class TokenStream:
    """Forward-only cursor over the parameter tokens of one gradient."""

    __slots__ = ('_tokens', '_position')

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens: Tuple[str, ...] = tuple(tokens)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._tokens)

    def peek(self) -> str:
        if self.exhausted:
            raise MalformedTokenError("No tokens left to read")
        return self._tokens[self._position]

    def consume(self) -> str:
        token = self.peek()
        self._position += 1
        return token

    def consume_many(self, count: int) -> Tuple[str, ...]:
        """
        Consume exactly ``count`` tokens.

        Raises:
            MalformedTokenError: if fewer than ``count`` tokens remain; the
                cursor does not move in that case.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count > self.remaining:
            raise MalformedTokenError(
                f"Expected {count} more tokens at position {self._position}, only {self.remaining} left"
            )
        tokens = self._tokens[self._position:self._position + count]
        self._position += count
        return tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream({list(self._tokens)!r}, position={self._position})"


def tokenize(text: str) -> TokenStream:
    return TokenStream(split_parameters(extract_gradient_body(text)))
