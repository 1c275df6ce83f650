"""Module entrypoint for `python -m shape_verifier`."""

from .cli.run_verify import main


if __name__ == "__main__":
    main()
