"""Temperature reporting client that talks to a server over TCP or TLS."""

__version__ = "0.1.0"
__all__ = ["sensor", "commands", "client"]