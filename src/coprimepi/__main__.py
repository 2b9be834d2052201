"""Command-line interface."""
from coprimepi.main import main


if __name__ == "__main__":
    main()
