"""
Rewriter Base Module

A rewriter replaces every absolute ``http(s)://<source>`` reference in a
text with ``<scheme>://<target>``. Two strategies implement the same
contract and must produce identical output for identical input:

    - ``RegexRewriter``: one compiled pattern and ``re.sub``. Fast, but the
      substitution materializes every match and every output piece at once.
    - ``ScanRewriter``: a linear scan over ``://`` occurrences that copies
      the text into a buffer slice by slice. Slower, lower peak memory on
      large documents.

Matching rules shared by both strategies:
    - The scheme is ``http`` or ``https`` and, like the host, is compared
      case-insensitively (ASCII only).
    - The host must not be followed by a domain name character
      (letter, digit, ``.``, ``-`` or ``:``). ``http://example.com.evil.org``
      and ``http://example.com:8080`` therefore never match ``example.com``.

Replacement rules:
    - ``protocol == "auto"`` keeps the scheme exactly as written.
    - ``http``/``https`` forces that scheme.
    - The host is always replaced with ``target``.

Rewriting a text with the same target twice is a no-op the second time,
since the target host never matches a different source host.
"""
import string

from ..constants import constants

DOMAIN_NAME_CHARS = frozenset(string.ascii_letters + string.digits + ".-:")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(value) -> str:
    return value.translate(_ASCII_LOWER)


class BaseRewriter:
    """Common contract of the rewrite strategies."""

    low_memory = False

    def replacement(self, scheme, target, protocol) -> str:
        if protocol == constants.PROTOCOL_AUTO:
            return f"{scheme}://{target}"
        return f"{protocol}://{target}"

    def rewrite(self, content, source, target, protocol=constants.PROTOCOL_AUTO) -> str:
        """
        Return ``content`` with every ``http(s)://<source>`` reference pointing
        to ``target``.

        Args:
            content (str): A single URL or a whole document
            source (str): The host to look for, optionally with a port
            target (str): The host to write instead
            protocol (str): ``auto``, ``http`` or ``https``

        Raises:
            NotImplementedError: Always raised by the base class
        """
        raise NotImplementedError("Subclasses must implement rewrite()")

    def __repr__(self):
        return f"<{self.__class__.__name__}>"
