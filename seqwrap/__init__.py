"""32-bit wrapping sequence numbers relative to an initial sequence number."""

__version__ = "0.1.0"
__all__ = ["wrapping"]