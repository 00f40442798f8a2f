"""
Entry point for the community chat client.
"""
from .cli import app


def main():
    """Launch the command line client."""
    app(prog_name="communitychat")


if __name__ == "__main__":
    main()
