from .loader import ImageLoader

__all__ = ["ImageLoader"]
