from .camera import Camera
from .explorer import Explorer

__all__ = ["Camera", "Explorer"]
