from enum import Enum
from rich.console import Console
from rich.markup import escape
from fsmenu.file_manager import FileManager
from fsmenu.prompts import prompt_user, confirm

console = Console()


class MenuOption(Enum):
    CREATE_FILE = "1"
    READ_FILE = "2"
    DELETE_FILE = "3"
    WRITE_FILE = "4"
    CREATE_FOLDER = "5"
    DELETE_FOLDER = "6"
    LIST_ITEMS = "7"
    EXIT = "8"

    @classmethod
    def parse(cls, answer):
        """Match the answer exactly against the option codes, None if unknown."""
        try:
            return cls(answer)
        except ValueError:
            return None


class FileMenu:
    def __init__(self, output=None, file_manager=None, clear_screen=True):
        self.console = output or console
        self.file_manager = file_manager or FileManager(self.console)
        self.clear_screen = clear_screen
        self.handlers = {
            MenuOption.CREATE_FILE: self.create_file,
            MenuOption.READ_FILE: self.read_file,
            MenuOption.DELETE_FILE: self.delete_file,
            MenuOption.WRITE_FILE: self.write_file,
            MenuOption.CREATE_FOLDER: self.create_folder,
            MenuOption.DELETE_FOLDER: self.delete_folder,
            MenuOption.LIST_ITEMS: self.list_items,
        }

    def ask(self, question):
        return prompt_user(question, output=self.console)

    def show_menu(self):
        if self.clear_screen:
            self.console.clear()

        for option in MenuOption:
            self.console.print(f"[blue]{option.value} [magenta]{option.name}[/magenta][/blue]")

        return self.ask("\nSelect an Option: ")

    def run(self):
        """Run the menu until Exit, an invalid option or the end of input.

        Returns MenuOption.EXIT when the user chose to exit, None otherwise.
        """
        while True:
            try:
                answer = self.show_menu()
                option = MenuOption.parse(answer)

                if option is None:
                    self.console.print("[red]Invalid option.[/red]")
                    return None
                if option is MenuOption.EXIT:
                    self.console.print("[red]Exiting...[/red]")
                    return option

                self.handlers[option]()
                self.ask("[dim]Press enter to continue...[/dim]")
            except (EOFError, KeyboardInterrupt):
                self.console.print("\n[red]Exiting...[/red]")
                return None

    def create_file(self):
        file_path = self.ask("Enter the filepath: ")
        content = ""
        if confirm("Do you want initial content? (y/n): ", output=self.console):
            content = self.ask("Enter the content: ")

        self.file_manager.handle_file_operation(
            "creation", file_path,
            lambda: self.file_manager.create_file(file_path, content)
        )

    def read_file(self):
        file_path = self.ask("Enter the filepath: ")

        def show():
            content = self.file_manager.read_file(file_path)
            self.console.print("[green]Fetched your file content ✅[/green]")
            self.console.print(content, markup=False, highlight=False, emoji=False, soft_wrap=True)

        self.file_manager.handle_file_operation("reading", file_path, show)

    def delete_file(self):
        file_path = self.ask("Enter the filepath: ")
        if not confirm("Confirm delete? (y/n): ", output=self.console):
            self.console.print("[blue]Action stopped.[/blue]")
            return

        self.file_manager.handle_file_operation(
            "deletion", file_path,
            lambda: self.file_manager.delete_file(file_path)
        )

    def write_file(self):
        file_path = self.ask("Enter the filepath: ")
        content = self.ask("Enter the content: ")

        self.file_manager.handle_file_operation(
            "writing", file_path,
            lambda: self.file_manager.write_file(file_path, content)
        )

    def create_folder(self):
        folder_path = self.ask("Enter the folder path: ")

        self.file_manager.handle_folder_operation(
            "creation", folder_path,
            lambda: self.file_manager.create_folder(folder_path)
        )

    def delete_folder(self):
        folder_path = self.ask("Enter the folder path: ")
        if not confirm("Confirm delete? (y/n): ", output=self.console):
            self.console.print("[blue]Action stopped.[/blue]")
            return

        self.file_manager.handle_folder_operation(
            "deletion", folder_path,
            lambda: self.file_manager.delete_folder(folder_path)
        )

    def list_items(self):
        list_path = self.ask("Enter the list path: (current path) ") or "./"

        def show():
            for item in self.file_manager.list_items(list_path):
                icon = "📁" if item["type"] == "folder" else "📄"
                self.console.print(f"{icon} {escape(item['name'])} [dim]{escape(item['path'])}[/dim]", emoji=False, soft_wrap=True)

        self.file_manager.handle_folder_operation("listing", list_path, show)
