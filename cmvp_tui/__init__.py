"""Terminal browser for the NIST CMVP validated module catalog."""

__version__ = "0.1.0"
