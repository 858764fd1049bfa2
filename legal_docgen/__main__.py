"""Entry point for `python -m legal_docgen`"""

from legal_docgen.cli.main import app

if __name__ == "__main__":
    app()
