"""muleappctl — install packaged Mule applications into a Mule runtime."""

__version__ = "0.1.0"
