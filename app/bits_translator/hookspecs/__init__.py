"""Hook specifications."""

from bits_translator.hookspecs import host

__all__ = ["host"]
