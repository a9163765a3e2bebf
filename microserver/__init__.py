"""A tiny UDP command server with a small command language that sets an LED state."""

__version__ = "0.1.0"
__all__ = ["evaluator", "server", "utils"]