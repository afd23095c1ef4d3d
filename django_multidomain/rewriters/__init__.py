from .base import BaseRewriter
from .regex_rewriter import RegexRewriter
from .scan_rewriter import ScanRewriter


def get_rewriter(low_memory=False) -> BaseRewriter:
    """Return the rewrite strategy matching the ``LOW_MEMORY`` option."""
    return ScanRewriter() if low_memory else RegexRewriter()


__all__ = ["BaseRewriter", "RegexRewriter", "ScanRewriter", "get_rewriter"]
