"""Parser for single-line task tracker commands"""
import re
from datetime import date
from typing import Callable, List, Optional, Pattern, Tuple

from core.commands import (
    Command,
    KEYWORDS,
    ByeCommand,
    ListCommand,
    DoneCommand,
    DeleteCommand,
    ToDoCommand,
    DeadlineCommand,
    EventCommand,
    FindCommand,
    SortCommand,
    HelpCommand,
)
from core.exceptions import ParseError
from utils.logging_config import get_logger

logger = get_logger('parser')

Builder = Callable[[str], Command]


class CommandParser:
    """
    Turns one input line into a typed command.

    Grammars are tried in a fixed order. The first grammar whose keyword
    matches the start of the line decides the outcome: either a command or
    a ``ParseError`` explaining what is wrong with its arguments. Lines that
    match no keyword yield ``None``.
    """

    # Task numbers: optional sign followed by decimal digits
    INTEGER_PATTERN = re.compile(r'[+-]?\d+', re.ASCII)

    # Strict ISO calendar date
    DATE_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}', re.ASCII)

    DATE_ERROR = "Date must be valid (expected YYYY-MM-DD)"

    def __init__(self):
        # Builders are named after their keyword: 'deadline' -> self._deadline
        self._grammars: List[Tuple[str, Pattern[str], Builder]] = [
            (keyword, self._keyword_pattern(keyword), getattr(self, f'_{keyword}'))
            for keyword in KEYWORDS
        ]

    @property
    def keywords(self) -> List[str]:
        return [keyword for keyword, _, _ in self._grammars]

    @staticmethod
    def _keyword_pattern(keyword: str) -> Pattern[str]:
        # Keyword alone, or keyword + one whitespace character + arguments
        return re.compile(rf'{re.escape(keyword)}(?:\s(?P<args>.*))?', re.DOTALL)

    def parse(self, line: str) -> Optional[Command]:
        """
        Parse one line of input.

        Returns:
            The parsed command, or None if the line starts with no known keyword

        Raises:
            ParseError: the keyword matched but its arguments are invalid
        """
        for keyword, pattern, builder in self._grammars:
            match = pattern.fullmatch(line)
            if not match:
                continue

            args = (match.group('args') or '').strip()
            try:
                command = builder(args)
            except ParseError as e:
                e.keyword = keyword
                logger.debug(f"Rejected '{keyword}': {e.reason}", extra={'keyword': keyword})
                raise

            logger.debug(f"Parsed '{keyword}' command", extra={'keyword': keyword})
            return command

        return None

    # ==================== Argument helpers ====================

    def _parse_index(self, args: str) -> int:
        if not args:
            raise ParseError("Task number cannot be empty")
        if not self.INTEGER_PATTERN.fullmatch(args):
            raise ParseError("Task number must be an integer")
        return int(args)

    def _parse_date(self, text: str) -> date:
        if not self.DATE_PATTERN.fullmatch(text):
            raise ParseError(self.DATE_ERROR)
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise ParseError(self.DATE_ERROR) from None

    def _parse_dated(self, args: str, separator: str, missing_date: str) -> Tuple[str, date]:
        """Split '<description> <separator> <date>' and validate both halves"""
        # The separator only counts as a whole word, not inside 'a/by-law'
        parts = re.split(rf'(?:^|\s){re.escape(separator)}(?=\s|$)', args, maxsplit=1)
        description = parts[0].strip()
        when = parts[1].strip() if len(parts) > 1 else ''

        if not description:
            raise ParseError("Description cannot be empty")
        if not when:
            raise ParseError(missing_date)
        return description, self._parse_date(when)

    # ==================== Grammars ====================

    def _bye(self, args: str) -> Command:
        return ByeCommand()

    def _list(self, args: str) -> Command:
        if args:
            raise ParseError("List does not accept arguments")
        return ListCommand()

    def _done(self, args: str) -> Command:
        return DoneCommand(index=self._parse_index(args))

    def _delete(self, args: str) -> Command:
        return DeleteCommand(index=self._parse_index(args))

    def _todo(self, args: str) -> Command:
        if not args:
            raise ParseError("Description cannot be empty")
        return ToDoCommand(description=args)

    def _deadline(self, args: str) -> Command:
        description, by = self._parse_dated(args, '/by', "Deadline cannot be empty")
        return DeadlineCommand(description=description, by=by)

    def _event(self, args: str) -> Command:
        description, at = self._parse_dated(args, '/at', "Event time cannot be empty")
        return EventCommand(description=description, at=at)

    def _find(self, args: str) -> Command:
        if not args:
            raise ParseError("Search string cannot be empty")
        return FindCommand(query=args)

    def _sort(self, args: str) -> Command:
        # Trailing text is ignored, unlike list
        return SortCommand()

    def _help(self, args: str) -> Command:
        if not args:
            raise ParseError("Command name cannot be empty")
        return HelpCommand(topic=args)
