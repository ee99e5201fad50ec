# src/patternbook/prompts.py
"""
Console input helpers shared by the menu driven demos.
"""

from typing import Callable, Iterable, Optional

Reader = Callable[[str], str]


class ScriptedInput:
    """Stand-in for ``input()`` that answers from a fixed sequence.

    Each answer is echoed after its prompt so the transcript reads like an
    interactive session. Raises EOFError once the script runs out, the same
    way ``input()`` does on a closed stdin.
    """

    def __init__(self, answers: Iterable[object], echo: bool = True):
        self._answers = iter(answers)
        self.echo = echo

    def __call__(self, prompt: str = "") -> str:
        try:
            answer = str(next(self._answers))
        except StopIteration:
            raise EOFError("scripted input exhausted") from None
        if self.echo:
            print(f"{prompt}{answer}")
        return answer


def read_int(read: Reader, prompt: str) -> Optional[int]:
    """Read one integer, returning None if the answer is not a number."""
    answer = read(prompt)
    try:
        return int(answer.strip())
    except ValueError:
        return None
