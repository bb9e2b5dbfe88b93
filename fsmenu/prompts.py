from rich.console import Console
from rich.prompt import Prompt

console = Console()


class MenuPrompt(Prompt):
    # Questions carry their own punctuation
    prompt_suffix = ""

    def process_response(self, value):
        # Answers are used exactly as typed, surrounding whitespace included
        return value


def prompt_user(question, output=None):
    """Ask a single question and return the answer ('' on empty input).

    Each call reads exactly one line; EOFError is left to the caller.
    """
    return MenuPrompt.ask(
        f"[green]{question}[/green]",
        console=output or console,
        default="",
        show_default=False,
    )


def confirm(question, output=None):
    # Only an explicit "y" counts; anything else is a refusal, no re-prompt
    return prompt_user(question, output=output).lower() == "y"
