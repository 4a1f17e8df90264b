"""Run the times tables game from a source checkout."""

from timestables.cli import main


if __name__ == "__main__":
    main()
