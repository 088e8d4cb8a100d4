from .example import Example2D, shuffle, split  # noqa: F401
