"""FTP server building blocks: ASCII conversion, data transfer, address parsing and stream helpers."""

__version__ = "0.1.0"