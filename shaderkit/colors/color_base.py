from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Callable
from ..types.format_type import FormatType, format_classes
from ..types.color_types import Scalar, ScalarVector, HUE_SPACES, ColorSpace
from abc import ABC


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[ScalarVector]
    null_value: ClassVar[ScalarVector]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default, shadowed per instance once frozen
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector | ColorBase) -> None:
        if len(self.maxima) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = value.convert(self.mode, self.format_type).value

        if isinstance(value, (str, bytes)) or not hasattr(value, '__len__'):
            raise TypeError(f"{self.mode} expects a {self.num_channels}-channel sequence, got {value!r}")
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value, got {tuple(value)!r}")

        # type enforcement
        cast_type = format_classes[self.format_type]
        values = tuple(cast_type(v) for v in cast(Tuple[Any, ...], value))

        # clamp value
        values = tuple(
            max(cast_type(0), min(v, m)) for v, m in zip(values, self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = values

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return (
                self.mode == other.mode
                and self.format_type == other.format_type
                and self._value == other._value
            )
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    num_channels: ClassVar[int]
    maxima: ClassVar[ScalarVector]
    mode: ClassVar[ColorSpace]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    @property
    def alpha_max(self) -> Scalar:
        return self.maxima[self.alpha_index]

    def with_alpha(self, alpha: Scalar):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to the format's alpha range.

        Returns:
            New color instance with updated alpha.
        """
        a = max(0, min(alpha, self.alpha_max))
        return self.__class__(self.value[:-1] + (a,))  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
