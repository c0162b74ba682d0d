from .rest import RestNetwork

__all__ = ["RestNetwork"]
