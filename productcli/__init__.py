"""Interactive command-line manager for a JSON-backed product catalog."""

__all__ = [
    "cli",
    "display",
    "models",
    "prompts",
    "services",
    "validators",
]
