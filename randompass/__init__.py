"""randompass: random password generator with a configurable character pool."""

__version__ = "0.1.0"
