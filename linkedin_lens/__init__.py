"""linkedin-lens: LinkedIn member analytics built from Member Data API payloads."""

__version__ = "0.1.0"
