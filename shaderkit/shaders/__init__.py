from .standard_shader import (
    STANDARD_SHADER_NAME,
    ShaderCache,
    default_shader_cache,
    get_standard_shader,
    is_standard_shader,
    is_using_standard_shader,
    set_shader_finder,
)

__all__ = [
    'STANDARD_SHADER_NAME',
    'ShaderCache',
    'default_shader_cache',
    'get_standard_shader',
    'is_standard_shader',
    'is_using_standard_shader',
    'set_shader_finder',
]
