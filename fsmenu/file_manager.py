import logging
import os
import shutil
from rich.console import Console
from rich.markup import escape

console = Console()
logger = logging.getLogger(__name__)


class FileManager:
    def __init__(self, output=None):
        self.console = output or console

    def create_file(self, path, content=""):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content or "")

    def read_file(self, path):
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def delete_file(self, path):
        os.remove(path)

    def write_file(self, path, content):
        """Append content to the end of the file, creating it if missing."""
        with open(path, "a", encoding="utf-8") as f:
            f.write(content)

    def create_folder(self, path):
        os.makedirs(path, exist_ok=True)

    def delete_folder(self, path):
        shutil.rmtree(path)

    def list_items(self, path="./"):
        """Return the direct children of path.

        Each entry is a dict with the entry name, its type ("file" or
        "folder") and its absolute path resolved against the listed directory.
        """
        items = []
        for name in os.listdir(path):
            full_path = os.path.join(path, name)
            items.append({
                "name": name,
                "type": "folder" if os.path.isdir(full_path) else "file",
                "path": os.path.abspath(full_path),
            })
        return items

    def handle_file_operation(self, operation, path, action):
        return self._handle_operation("File", operation, path, action)

    def handle_folder_operation(self, operation, path, action):
        return self._handle_operation("Folder", operation, path, action)

    def _handle_operation(self, category, operation, path, action):
        logger.debug("%s %s started: %s", category, operation, path)
        try:
            action()
        except Exception as e:
            logger.info("%s %s failed for %s: %s", category, operation, path, e)
            self.console.print(f"[red]Error: {category} {operation} failed: {escape(str(e))}[/red]")
            return False
        logger.debug("%s %s succeeded: %s", category, operation, path)
        self.console.print(f"[green]{category} {operation} successful ✅[/green]")
        return True
