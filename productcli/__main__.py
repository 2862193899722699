"""Module entrypoint to keep the CLI runnable via ``python -m productcli``."""

from .cli import main


if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
