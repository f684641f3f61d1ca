"""Module entrypoint for ``python -m spacehogs``.

Argument parsing, validation and report output happen in ``spacehogs.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
