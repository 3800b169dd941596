"""Interactive console prompts for picking options and files."""

from __future__ import annotations

import os
from collections.abc import Sequence


def _get_integer(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text)
        except ValueError:
            print("Illegal integer format. Try again.")


def make_selection_from(title: str, options: Sequence[str]) -> int:
    """List the options and prompt until one is picked; return its index."""
    if not options:
        raise ValueError("Requesting the user to pick an item from an empty list.")

    print(title)
    for index, option in enumerate(options):
        print(f"{index} {option}")

    while True:
        choice = _get_integer("Your choice: ")
        if 0 <= choice < len(options):
            return choice
        print(f"Please enter a number between 0 and {len(options) - 1}")


def make_file_selection(suffix: str, directory: str = "res/") -> str:
    """Ask the user to pick a file with the given suffix from a directory."""
    options = sorted(name for name in os.listdir(directory or ".") if name.endswith(suffix))

    prefix = directory or "."
    if not prefix.endswith("/"):
        prefix += "/"

    choice = make_selection_from("Please choose a demo file from this list:", options)
    return prefix + options[choice]


def get_yes_or_no(prompt: str) -> bool:
    """Prompt until the answer starts with Y or N."""
    while True:
        answer = input(prompt).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        print("Please type a word that starts with 'Y' or 'N'.")