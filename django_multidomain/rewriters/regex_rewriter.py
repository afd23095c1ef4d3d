import re
from functools import lru_cache

from ..constants import constants
from .base import BaseRewriter


@lru_cache(maxsize=256)
def compile_domain_pattern(source):
    return re.compile(
        r"(https?)://" + re.escape(source) + r"(?![a-z0-9.\-:])",
        re.IGNORECASE | re.ASCII,
    )


class RegexRewriter(BaseRewriter):
    def rewrite(self, content, source, target, protocol=constants.PROTOCOL_AUTO) -> str:
        pattern = compile_domain_pattern(source)
        return pattern.sub(
            lambda match: self.replacement(match.group(1), target, protocol),
            content,
        )
