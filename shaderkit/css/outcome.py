from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .errors import GradientParseError
from .gradient_spec import GradientSpec


@dataclass(frozen=True)
class ParseSuccess:
    spec: GradientSpec

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> GradientSpec:
        return self.spec

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseFailure:
    error: GradientParseError

    @property
    def ok(self) -> bool:
        return False

    @property
    def reason(self) -> str:
        return str(self.error)

    def unwrap(self) -> GradientSpec:
        raise self.error

    def __bool__(self) -> bool:
        return False


ParseOutcome = Union[ParseSuccess, ParseFailure]
