from .modules import module_exists
from .peeking import PeekingIterator
from .uv import install_uvloop

__all__ = [
    "module_exists",
    "PeekingIterator",
    "install_uvloop"
]
