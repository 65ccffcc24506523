"""
Identity checks for the toolkit's standard shader.

Shader lookup belongs to the host engine, so the cache is given a *finder*:
any callable mapping a shader name to a handle, or to None when the engine
does not know the shader (yet). The first non-None handle is kept for the
lifetime of the cache.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)

STANDARD_SHADER_NAME = "Graphics Tools/Standard"

ShaderT = TypeVar("ShaderT")
ShaderFinder = Callable[[str], Optional[ShaderT]]


class HasShader(Protocol):
    shader: Any


class ShaderCache(Generic[ShaderT]):
    """Lazily populated, single-owner handle to one named shader."""

    __slots__ = ('_name', '_finder', '_shader')

    def __init__(self, finder: Optional[ShaderFinder] = None, name: str = STANDARD_SHADER_NAME) -> None:
        self._name = name
        self._finder = finder
        self._shader: Optional[ShaderT] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_populated(self) -> bool:
        return self._shader is not None

    @property
    def finder(self) -> Optional[ShaderFinder]:
        return self._finder

    @finder.setter
    def finder(self, finder: Optional[ShaderFinder]) -> None:
        self._finder = finder

    def get(self) -> Optional[ShaderT]:
        """Return the cached handle, looking it up first if not cached yet."""
        if self._shader is None and self._finder is not None:
            self._shader = self._finder(self._name)
            if self._shader is None:
                logger.debug("Shader %r not found, will retry on next lookup", self._name)
        return self._shader

    def __repr__(self) -> str:
        return f"ShaderCache(name={self._name!r}, populated={self.is_populated})"


default_shader_cache: ShaderCache[Any] = ShaderCache()


def set_shader_finder(finder: Optional[ShaderFinder]) -> None:
    """Install the engine lookup used by :data:`default_shader_cache`."""
    default_shader_cache.finder = finder


def get_standard_shader(cache: Optional[ShaderCache] = None) -> Any:
    return (cache if cache is not None else default_shader_cache).get()


def is_standard_shader(shader: Any, cache: Optional[ShaderCache] = None) -> bool:
    """True if ``shader`` is the standard shader. None matches a lookup that found nothing."""
    return shader == get_standard_shader(cache)


def is_using_standard_shader(material: Optional[HasShader], cache: Optional[ShaderCache] = None) -> bool:
    """True if ``material`` renders with the standard shader."""
    return is_standard_shader(material.shader if material is not None else None, cache)
