"""Localization package: references, tables and the Localizer facade.

Submodules:
    types      - PEP 695 type aliases (MessagePath, MessageTemplate)
    table      - Table protocol and the in-memory MessageTable
    reference  - LocalizedString persistent reference value
    localizer  - Localizer (resolve + parse + format in one call)

Python 3.13+.
"""

from icumessage.localization.localizer import Localizer
from icumessage.localization.reference import LocalizedString
from icumessage.localization.table import MessageTable, Table
from icumessage.localization.types import MessagePath, MessageTemplate

__all__ = [
    "LocalizedString",
    "Localizer",
    "MessagePath",
    "MessageTable",
    "MessageTemplate",
    "Table",
]
