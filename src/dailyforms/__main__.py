"""Entry point for 'python -m dailyforms'."""

from dailyforms.cli import main

if __name__ == "__main__":
    main()
