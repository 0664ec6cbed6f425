"""Three-tier candidate key resolution."""

from typing import Optional

from fdkit.config.logging import get_logger
from fdkit.core.keys import KeySearch, filter_containing_keys
from fdkit.core.relation import Relation
from fdkit.ir.relation import KeyReport

logger = get_logger(__name__)


def resolve_candidate_keys(
    relation: Relation,
    brute_force: bool = True,
    max_checks: Optional[int] = None,
    exhaustive_only: bool = False,
) -> KeyReport:
    """
    Find candidate keys, escalating from cheap strategies to exhaustive search.

    Direct closures are tried first, then closures augmented with up to two
    missing attributes. Only if both come back empty (and brute_force is set)
    is the exhaustive search run.

    Args:
        relation: Relation to analyze
        brute_force: Whether to run the exhaustive search as a last resort
        max_checks: Optional closure budget for the exhaustive search
        exhaustive_only: Skip the cheap strategies and search exhaustively

    Returns:
        KeyReport naming the strategy that produced the keys

    Raises:
        SearchBudgetExceeded: If the exhaustive search runs out of budget
    """
    if not exhaustive_only:
        keys = relation.candidate_keys()
        if keys:
            logger.debug(f"{relation.name}: {len(keys)} keys from declared closures")
            return _report(relation, "direct", keys)

        keys = relation.candidate_keys_alt()
        if keys:
            logger.debug(f"{relation.name}: {len(keys)} keys from augmented closures")
            return _report(relation, "augmented", keys)

        if not brute_force:
            return _report(relation, "none", [])

        logger.warning(
            f"{relation.name}: no straightforward candidate keys, "
            f"running brute-force search over {len(relation.attrs)} attributes"
        )
    search = KeySearch(relation.attrs, relation.func_deps, max_checks=max_checks)
    keys = filter_containing_keys(search.run())
    return _report(relation, "exhaustive", keys, checks=search.checks)


def _report(relation, strategy, keys, checks=0) -> KeyReport:
    return KeyReport(
        relation=relation.name,
        strategy=strategy,
        keys=[k.sorted() for k in keys],
        checks=checks,
    )
