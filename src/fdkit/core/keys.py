"""Exhaustive candidate-key search and the minimality filter."""

from typing import List, Optional, Sequence, Set

from fdkit.config.logging import get_logger
from .attrs import AttrSet
from .closure import attribute_closure
from .errors import SearchBudgetExceeded
from .funcdep import FuncDep

logger = get_logger(__name__)

# Joins sorted members into the memo key; never appears in attribute names.
_KEY_SEP = "\x1f"


def filter_containing_keys(candidates: Sequence[AttrSet]) -> List[AttrSet]:
    """
    Reduce candidates to the ones that contain no smaller candidate.

    Candidates are ordered by decreasing size. The smallest remaining one is
    emitted and every remaining candidate containing it is dropped, until
    nothing is left. The input sequence is not modified.

    Args:
        candidates: Attribute sets that each determine the whole relation

    Returns:
        Minimal candidates, smallest first
    """
    if len(candidates) <= 1:
        return list(candidates)

    remaining = sorted(candidates, key=len, reverse=True)
    result: List[AttrSet] = []
    while remaining:
        smallest = remaining[-1]
        result.append(smallest)
        remaining = [c for c in remaining[:-1] if not c.contains(smallest)]
    return result


class KeySearch:
    """
    Backtracking enumeration of every attribute subset that is a superkey.

    Subsets are grown one attribute at a time, depth bounded by the number of
    attributes. Each distinct subset (by sorted members) is closed once; a
    subset seen before is skipped together with everything grown from it,
    since that branch was already explored.
    """

    def __init__(
        self,
        attrs: AttrSet,
        fds: Sequence[FuncDep],
        max_checks: Optional[int] = None,
    ):
        self.attrs = attrs
        self.fds = list(fds)
        self.max_checks = max_checks
        self.checks = 0
        self._seen: Set[str] = set()
        self._found: List[AttrSet] = []

    def run(self) -> List[AttrSet]:
        """Return every superkey found (not yet filtered for minimality)."""
        self.checks = 0
        self._seen = set()
        self._found = []
        if len(self.attrs) > 0:
            self._recur(AttrSet(), len(self.attrs))
        logger.debug(
            f"Key search over {len(self.attrs)} attributes: "
            f"{self.checks} closures, {len(self._found)} superkeys"
        )
        return self._found

    def _recur(self, current: AttrSet, nremain: int) -> None:
        for a in self.attrs:
            if not current.add(a):
                continue
            if self._check(current) and nremain > 1:
                self._recur(current, nremain - 1)
            current.remove(a)

    def _check(self, candidate: AttrSet) -> bool:
        """Close candidate unless already tested. Returns True for a new subset."""
        key = candidate.to_string(_KEY_SEP)
        if key in self._seen:
            return False
        if self.max_checks is not None and self.checks >= self.max_checks:
            raise SearchBudgetExceeded(self.max_checks, self.checks)
        self._seen.add(key)
        self.checks += 1

        if attribute_closure(candidate, self.fds).contains(self.attrs):
            self._found.append(candidate.copy())
        return True
