"""User Interface Protocol - the blocking interactions controllers need from a front end.

Invariants:
    - alert() and confirm() block the action until the user responds
    - navigate() receives an application route, not a URL
"""

from typing import Protocol


class UserInterface(Protocol):
    def alert(self, message: str) -> None: ...
    def confirm(self, message: str) -> bool: ...
    def navigate(self, route: str) -> None: ...
