"""Search the Yandex Music catalogue and download tracks with their covers."""

__version__ = "0.1.0"
__all__ = ["errors", "formats", "models", "yandex"]