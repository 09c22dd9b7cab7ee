#
# udisks2 - Copyright (C) 2026 UDisks2 Client Developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
"""
Localization

Context-qualified message lookups in the "udisks2" gettext domain.
Untranslated messages fall back to the msgid.
"""

import gettext
import locale

from wrapt import synchronized

DOMAIN = "udisks2"

_translation = None
_locale_dir = None


@synchronized
def set_locale_dir(locale_dir: str | None):
    """
    Select the directory holding message catalogs

    :param locale_dir: Directory, or None for the system default
    """
    global _translation, _locale_dir # pylint: disable=global-statement
    _locale_dir = locale_dir
    _translation = None


@synchronized
def translation() -> gettext.NullTranslations:
    """Return the active translation catalog"""
    global _translation # pylint: disable=global-statement
    if _translation is None:
        _translation = gettext.translation(DOMAIN, localedir=_locale_dir, fallback=True)
    return _translation


def pgettext(context: str, message: str) -> str:
    """Translate message within context"""
    return translation().pgettext(context, message)


def npgettext(context: str, singular: str, plural: str, n: int) -> str:
    """Translate a plural-aware message within context"""
    return translation().npgettext(context, singular, plural, n)


def pgettext_f(context: str, message: str, *args) -> str:
    """
    Translate a printf-style format string within context
    and apply the arguments.
    """
    return pgettext(context, message) % args


def format_number(value, digits: int = 0, grouping: bool = False) -> str:
    """
    Format a number using the current numeric locale

    :param value: The number to format
    :param digits: Number of fractional digits
    :param grouping: Insert thousands separators
    """
    return locale.format_string(f"%.{digits}f", value, grouping=grouping)
