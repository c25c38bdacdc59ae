"""A small interactive shell with pipelines, parallel commands and redirection."""

__version__ = "0.1.0"
__all__ = ["__version__"]