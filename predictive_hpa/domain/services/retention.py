"""Retention policy shared by every predictor: evict the oldest surplus."""

from typing import List, Sequence

from predictive_hpa.domain.entities.evaluation import StoredEvaluation, sort_by_created


def select_ids_to_remove(
    evaluations: Sequence[StoredEvaluation], capacity: int
) -> List[int]:
    """
    Return the IDs of the evaluations exceeding ``capacity``, oldest first.

    Evaluations are ordered by creation time with the ID as secondary key,
    so entries created at the same instant are evicted deterministically.
    """
    excess = len(evaluations) - capacity
    if excess <= 0:
        return []
    return [stored.id for stored in sort_by_created(evaluations)[:excess]]
