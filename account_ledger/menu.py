"""
Interactive Menu Module

Text menu that drives AccountOperations: renders the options, reads a
choice, dispatches it and loops until the user exits.
"""

from enum import Enum
from typing import Callable, Optional

from .config import get_config
from .errors import InvalidAmount
from .ledger import Ledger
from .logging_config import get_logger, setup_logging, log_action
from .operations import AccountOperations

logger = get_logger(__name__)

SEPARATOR = "--------------------------------"
CHOICE_PROMPT = "Enter your choice (1-4): "
CREDIT_PROMPT = "Enter credit amount: "
DEBIT_PROMPT = "Enter debit amount: "
INVALID_CHOICE_MESSAGE = "Invalid choice, please select 1-4."
GOODBYE_MESSAGE = "Exiting the program. Goodbye!"


class MenuOption(Enum):
    """Menu choices and the codes the user types for them"""
    VIEW_BALANCE = "1"
    CREDIT = "2"
    DEBIT = "3"
    EXIT = "4"


MENU_LINES = [
    SEPARATOR,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    SEPARATOR,
]


class AccountMenu:
    """
    Menu loop over a set of account operations

    prompt takes a message and returns the line typed by the user;
    output takes one line of text to show.
    """

    def __init__(
        self,
        operations: AccountOperations,
        prompt: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None
    ):
        self.operations = operations
        self.prompt = prompt or input
        self.output = output or print

    def display_menu(self) -> None:
        for line in MENU_LINES:
            self.output(line)

    def handle_choice(self, choice: str) -> bool:
        """
        Dispatch a single menu choice

        Returns:
            False when the user chose to exit, True otherwise
        """
        try:
            option = MenuOption(choice.strip())
        except ValueError:
            self.output(INVALID_CHOICE_MESSAGE)
            return True

        if option is MenuOption.EXIT:
            return False

        if option is MenuOption.VIEW_BALANCE:
            self.output(self.operations.view_balance())
            return True

        if option is MenuOption.CREDIT:
            action, amount_prompt, handler = "credit", CREDIT_PROMPT, self.operations.credit
        else:
            action, amount_prompt, handler = "debit", DEBIT_PROMPT, self.operations.debit

        amount_input = self.prompt(amount_prompt)
        try:
            self.output(handler(amount_input))
        except InvalidAmount as e:
            log_action(logger, "warning", f"Transaction rejected: {e}",
                       action=action, resource="balance",
                       extra={"input": amount_input})
            self.output(f"Transaction rejected: {e}")
        return True

    def run(self) -> None:
        """Show the menu and dispatch choices until the user exits"""
        running = True
        while running:
            self.display_menu()
            try:
                choice = self.prompt(CHOICE_PROMPT)
                running = self.handle_choice(choice)
            except EOFError:
                logger.info("End of input, leaving menu")
                running = False

        self.output(GOODBYE_MESSAGE)


def main() -> int:
    """Console entry point: build the ledger from configuration and run the menu"""
    settings = get_config()
    setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file
    )

    ledger = Ledger(settings.initial_balance)
    menu = AccountMenu(AccountOperations(ledger))

    try:
        menu.run()
    except KeyboardInterrupt:
        print()
        print(GOODBYE_MESSAGE)
        return 130

    return 0
