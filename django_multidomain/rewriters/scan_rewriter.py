from io import StringIO

from ..constants import constants
from .base import DOMAIN_NAME_CHARS, BaseRewriter, ascii_lower

SEPARATOR = "://"


class ScanRewriter(BaseRewriter):
    """
    Linear scan implementation of the rewrite contract.

    The text is never copied as a whole besides the output buffer: every
    ``://`` occurrence is checked in place for a ``http``/``https`` scheme
    right before it and the source host right after it, and untouched
    slices are written to the buffer as they are passed.
    """

    low_memory = True

    def _scheme_start(self, content, sep):
        # "https" and "http" cannot both end at the same "://"
        if sep >= 5 and ascii_lower(content[sep - 5:sep]) == "https":
            return sep - 5
        if sep >= 4 and ascii_lower(content[sep - 4:sep]) == "http":
            return sep - 4
        return -1

    def rewrite(self, content, source, target, protocol=constants.PROTOCOL_AUTO) -> str:
        source_lower = ascii_lower(source)
        size = len(source)
        length = len(content)

        buffer = None
        written = 0
        sep = content.find(SEPARATOR)

        while sep != -1:
            start = self._scheme_start(content, sep)
            host_start = sep + len(SEPARATOR)
            host_end = host_start + size

            matched = (
                start >= written
                and host_end <= length
                and ascii_lower(content[host_start:host_end]) == source_lower
                and (host_end == length or content[host_end] not in DOMAIN_NAME_CHARS)
            )

            if matched:
                if buffer is None:
                    buffer = StringIO()
                buffer.write(content[written:start])
                buffer.write(self.replacement(content[start:sep], target, protocol))
                written = host_end
                sep = content.find(SEPARATOR, host_end)
            else:
                sep = content.find(SEPARATOR, sep + 1)

        if buffer is None:
            return content

        buffer.write(content[written:])
        return buffer.getvalue()
