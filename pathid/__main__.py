"""Module entrypoint: ``python -m pathid``."""

from pathid.cli import main

if __name__ == "__main__":
    main()
