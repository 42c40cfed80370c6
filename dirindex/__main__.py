"""Module entrypoint for ``python -m dirindex``.

Argument parsing and the generation run happen in ``dirindex.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
