"""
Utilities module for the roster manager.

Provides console printing helpers with rich formatting.
"""

from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any, console: Console | None = None) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.
        console (Console | None): The console to render with. Defaults to the
            shared console.

    Returns:
        str: The captured output as a string.

    """
    console = console or _console
    with console.capture() as capture:
        console.print(content, markup=True, end="")
    return capture.get()
