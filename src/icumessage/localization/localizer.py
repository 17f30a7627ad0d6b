"""Localizer facade: reference -> table -> parser -> formatter.

Performs the whole resolution flow for a LocalizedString in one call.
Unlike tables, which report missing paths as a boolean outcome, the facade
raises MessageNotFoundError so that a missing translation is never rendered
as placeholder text.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from icumessage.diagnostics import ErrorTemplate, MessageNotFoundError

if TYPE_CHECKING:
    from icumessage.runtime import MessageFormatter

    from .reference import LocalizedString
    from .table import Table

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)


class Localizer:
    """Resolves and formats localized references against one table.

    Example:
        >>> table = MessageTable({"inbox": "{n, plural, one {# message} other {# messages}}"})
        >>> localizer = Localizer(table, MessageFormatter.for_locale("en_US"))
        >>> localizer.localize(LocalizedString.from_path("inbox").with_argument("n", 2))
        '2 messages'
    """

    __slots__ = ("formatter", "table")

    def __init__(self, table: Table, formatter: MessageFormatter) -> None:
        self.table = table
        self.formatter = formatter

    def localize(self, reference: LocalizedString) -> str:
        """Resolve reference and format the result with its arguments.

        Literal references are formatted too, so a literal template may use
        placeholders.

        Raises:
            MessageNotFoundError: If the reference's path is not in the table
            MessageSyntaxError: If the resolved template is malformed
            MessageFormatError: If formatting fails
        """
        found, template = reference.resolve(self.table)
        if not found:
            path = reference.path or ""
            logger.debug("Path '%s' not found in %r", path, self.table)
            raise MessageNotFoundError(ErrorTemplate.message_not_found(path), path=path)
        return self.formatter.format(template, reference.arguments)
