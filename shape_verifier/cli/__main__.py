"""Module entrypoint for `python -m shape_verifier.cli`.

Delegates to the verifier CLI implementation.
"""

from .run_verify import main


if __name__ == "__main__":
    main()
