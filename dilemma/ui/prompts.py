from typing import TextIO
from rich.console import Console
from rich.prompt import IntPrompt, InvalidResponse, Prompt
from rich.text import Text
from dilemma.config import MAX_ROUNDS, MIN_ROUNDS
from dilemma.game.models import Difficulty, Move
from dilemma.prompts.templates import DIFFICULTY_OPTIONS, MAIN_MENU_OPTIONS, MOVE_OPTIONS

AFFIRMATIVE = {"y", "yes"}

class _EndOfInputMixin:
    """
    Turns an exhausted input stream into EOFError instead of an endless re-prompt.
    """

    @classmethod
    def get_input(cls, console: Console, prompt, password: bool, stream: TextIO | None = None) -> str:
        value = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and value == "":
            raise EOFError("Input stream exhausted")
        return value

class ChoicePrompt(_EndOfInputMixin, Prompt):
    illegal_choice_message = "[prompt.invalid.choice][!] Invalid choice! Please select one of the listed options."

class MovePrompt(ChoicePrompt):
    illegal_choice_message = "[prompt.invalid.choice][!] Invalid input. Please enter 1 or 2."

class TextPrompt(_EndOfInputMixin, Prompt):
    pass

class RoundsPrompt(_EndOfInputMixin, IntPrompt):
    validate_error_message = "[prompt.invalid]Invalid input. Please enter a number."
    range_error_message = f"[prompt.invalid]Please enter a number between {MIN_ROUNDS} and {MAX_ROUNDS}."

    def process_response(self, value: str) -> int:
        rounds = super().process_response(value)
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise InvalidResponse(self.range_error_message)
        return rounds

def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE

def ask_move(console: Console, stream: TextIO | None = None) -> Move:
    choice = MovePrompt.ask(
        Text("Your choice", style="bold cyan"),
        console=console,
        choices=list(MOVE_OPTIONS),
        stream=stream
    )
    return MOVE_OPTIONS[choice]

def ask_difficulty(console: Console, stream: TextIO | None = None) -> Difficulty:
    choice = ChoicePrompt.ask(
        Text("Select difficulty", style="bold cyan"),
        console=console,
        choices=list(DIFFICULTY_OPTIONS),
        stream=stream
    )
    return DIFFICULTY_OPTIONS[choice]

def ask_rounds(console: Console, stream: TextIO | None = None) -> int:
    return RoundsPrompt.ask(
        Text(f"How many rounds? ({MIN_ROUNDS}-{MAX_ROUNDS})", style="bold cyan"),
        console=console,
        stream=stream
    )

def ask_menu_choice(console: Console, stream: TextIO | None = None) -> str:
    return ChoicePrompt.ask(
        Text("Select an option", style="bold cyan"),
        console=console,
        choices=list(MAIN_MENU_OPTIONS),
        stream=stream
    )

def ask_play_again(console: Console, stream: TextIO | None = None) -> bool:
    # Anything but an explicit yes ends the play loop
    answer = TextPrompt.ask(
        Text("Play again? (y/n)", style="bold cyan"),
        console=console,
        stream=stream
    )
    return is_affirmative(answer)

def wait_for_enter(console: Console, message: str = "Press Enter to continue", stream: TextIO | None = None):
    TextPrompt.ask(Text(message, style="cyan"), console=console, stream=stream)
