from wunderlist_backup.cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
