"""CBOR data items: integers, floats and simple values, strings, arrays, maps and tags."""

__version__ = "0.1.0"