#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CAESAR SHIFT — English / Turkish
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Interactive cipher / decipher of a single word:
  1. Continue or quit
  2. Cipher or decipher
  3. Turkish (29 letters) or English (26 letters)
  4. Word, direction (left / right) and a signed shift

With a word on the command line runs a single operation and exits.
"""

import sys
import logging
import argparse
from typing import Dict, Optional, TextIO, TypeVar

from rich.console import Console
from rich.panel import Panel
from rich.logging import RichHandler
from rich.markup import escape
from rich import box

from caesar_shift import (
    ALPHABETS, LANGUAGE_NAMES, Alphabet, Direction, InvalidWord, Operation,
    normalize_word, parse_int,
)

log = logging.getLogger(__name__)

T = TypeVar('T')


# ═══════════════════════════════════════════════════════════════════════════════
# MENUS
# ═══════════════════════════════════════════════════════════════════════════════

CONTINUE_MENU = "Would you like to continue to cipher & decipher or quit?\n1.) Continue\n2.) Quit"
CONTINUE_ERROR = "Invalid input, please enter 1 for Continue or 2 for Quit."
CONTINUE_CHOICES = {1: True, 2: False}

OPERATION_MENU = "Please choose the desired operation:\n1.) Cipher\n2.) Decipher"
OPERATION_ERROR = "Please choose a valid operation (1 for Cipher or 2 for Decipher)."
OPERATION_CHOICES = {1: Operation.CIPHER, 2: Operation.DECIPHER}

LANGUAGE_MENU = "Please choose the desired language:\n1.) Turkish\n2.) English"
LANGUAGE_ERROR = "Please choose a valid language (1 for Turkish or 2 for English)."
LANGUAGE_CHOICES = {1: 'tr', 2: 'en'}

DIRECTION_MENU = "Please choose the desired direction to shift:\n1.) Left\n2.) Right"
DIRECTION_ERROR = "Please choose a valid direction (1 for Left or 2 for Right)."
DIRECTION_CHOICES = {1: Direction.LEFT, 2: Direction.RIGHT}

SHIFT_PROMPT = "Enter the number of positions to shift:"

INT_ERROR = "Invalid input. Please enter a valid integer."
WORD_ERRORS = {
    'empty': "Invalid input! Please enter a non-empty word without spaces or newline characters.",
    'alphabet': "Invalid input! Please enter a word containing only the characters from the selected alphabet.",
}


# ═══════════════════════════════════════════════════════════════════════════════
# UI
# ═══════════════════════════════════════════════════════════════════════════════

class UI:
    """Console prompts; `stream` replaces stdin (tests, pipes)"""

    def __init__(self, console: Optional[Console] = None, stream: Optional[TextIO] = None):
        self.c = console or Console()
        self.stream = stream

    def header(self):
        self.c.print(Panel(
            "[bold cyan]CAESAR SHIFT[/bold cyan]\n"
            "[dim]English (26) • Turkish (29)[/dim]",
            border_style="cyan", box=box.DOUBLE
        ))
        self.c.print()

    def read(self, prompt: str) -> str:
        self.c.print(prompt, markup=False, highlight=False)
        line = self.c.input(stream=self.stream)
        # readline() gives '' only at end of input
        if self.stream is not None and not line:
            raise EOFError("input stream closed")
        return line

    def warn(self, text: str):
        self.c.print(f"[yellow]{escape(text)}[/yellow]")

    def result(self, text: str):
        self.c.print(f"[bold green]{escape(text)}[/bold green]")

    def ask_int(self, prompt: str) -> int:
        while True:
            try:
                return parse_int(self.read(prompt))
            except ValueError:
                self.warn(INT_ERROR)

    def ask_choice(self, prompt: str, choices: Dict[int, T], error: str) -> T:
        while True:
            choice = self.ask_int(prompt)
            if choice in choices:
                return choices[choice]
            self.warn(error)

    def ask_word(self, prompt: str, alphabet: Alphabet) -> str:
        while True:
            try:
                return normalize_word(self.read(prompt), alphabet)
            except InvalidWord as e:
                self.warn(WORD_ERRORS[e.reason])


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION
# ═══════════════════════════════════════════════════════════════════════════════

def session(ui: UI):
    """Menu loop until the operator picks Quit"""
    ui.header()
    while ui.ask_choice(CONTINUE_MENU, CONTINUE_CHOICES, CONTINUE_ERROR):
        operation = ui.ask_choice(OPERATION_MENU, OPERATION_CHOICES, OPERATION_ERROR)
        lang = ui.ask_choice(LANGUAGE_MENU, LANGUAGE_CHOICES, LANGUAGE_ERROR)
        alphabet = ALPHABETS[lang]
        log.debug("operation=%s language=%s", operation.value, LANGUAGE_NAMES[lang])

        word = ui.ask_word(f"Please enter the word to {operation.value}:", alphabet)
        direction = ui.ask_choice(DIRECTION_MENU, DIRECTION_CHOICES, DIRECTION_ERROR)
        amount = ui.ask_int(SHIFT_PROMPT)

        result = operation.apply(word, amount, direction, alphabet)
        ui.result(operation.describe(word, result))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='caesar',
        description='Caesar shift for a single word over the English or Turkish alphabet',
    )
    p.add_argument('word', nargs='?',
                   help='Word for a single run (without it the interactive menu starts)')
    p.add_argument('-D', '--decipher', action='store_true',
                   help='Decipher instead of cipher')
    p.add_argument('-l', '--lang', choices=sorted(ALPHABETS), default='en',
                   help='Alphabet (default: en)')
    p.add_argument('-d', '--direction', choices=[d.value for d in Direction], default='right',
                   help='Shift direction (default: right)')
    p.add_argument('-s', '--shift', type=parse_int, default=3,
                   help='Number of positions, may be negative (default: 3)')
    p.add_argument('-r', '--raw', action='store_true',
                   help='Print only the resulting word')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Debug logging to stderr')
    return p


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def one_shot(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    alphabet = ALPHABETS[args.lang]
    try:
        word = normalize_word(args.word, alphabet)
    except InvalidWord as e:
        parser.error(f"{WORD_ERRORS[e.reason]} ({LANGUAGE_NAMES[args.lang]})")

    operation = Operation.DECIPHER if args.decipher else Operation.CIPHER
    result = operation.apply(word, args.shift, Direction(args.direction), alphabet)

    if args.raw:
        print(result)
    else:
        UI().result(operation.describe(word, result))
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.word is not None:
        return one_shot(args, parser)

    session(UI())
    return 0


def cli():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n👋")
    except (EOFError, OSError) as e:
        print(f"\n❌ Failed to read input: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\n❌ {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    cli()
