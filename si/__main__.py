"""Module entrypoint for ``python -m si``.

All argument parsing and dispatch happen in ``si.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
