"""Request builders, response models, stream reading and rate-limit parsing for assistant-style HTTP APIs."""

__version__ = "0.1.0"