"""Entry point for `python -m transcript_lens`."""


def main():
    from transcript_lens.cli import app
    app()


if __name__ == "__main__":
    main()
