from rich.console import Console
from fsmenu.config import load_settings, setup_logging
from fsmenu.menu import FileMenu

console = Console()


def main():
    # Load environment variables (.env is optional)
    settings = load_settings()
    logger = setup_logging(settings)
    logger.debug("Starting file menu with settings: %s", settings)

    app = FileMenu(console, clear_screen=settings["clear_screen"])
    app.run()


if __name__ == "__main__":
    main()
