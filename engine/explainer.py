"""Generates human-readable explanations for a trainee distribution."""

from typing import Dict, List

from engine.allocation_engine import rounded_share
from models.allocation import AllocationResult, CategoryResult


def explain_category(
    category: CategoryResult,
    total: int,
    total_weight: int,
    assigned_before: int,
    is_last: bool,
) -> List[str]:
    """Produce step-by-step explanation for one specialization's share."""
    steps = [
        f"Step 1 - Ratio: {category.weight} of {total_weight} instructors "
        f"=> ratio {category.ratio:.1%}"
    ]

    if is_last:
        steps.append(
            f"Step 2 - Remainder: {total} trainees - {assigned_before} already assigned "
            f"= {category.share} trainees (last specialization absorbs rounding)"
        )
    else:
        raw = total * category.ratio
        rounded = rounded_share(total, category.weight, total_weight)
        steps.append(
            f"Step 2 - Share: {total} x {category.ratio:.3f} = {raw:.2f} "
            f"=> rounded to {rounded} trainees"
        )
        if rounded != category.share:
            steps.append(
                f"Note: Only {category.share} trainees were left in the pool => capped at {category.share}"
            )

    steps.append(
        f"Step 3 - Percentage: {category.ratio:.1%} => displayed as {category.percentage}%"
    )
    steps.append(
        f"Step 4 - Load: {category.share} trainees / {category.weight} instructors "
        f"= {category.trainees_per_instructor:.2f} per instructor"
    )
    return steps


def explain_allocation(result: AllocationResult) -> Dict[str, List[str]]:
    """Explanation steps for every specialization, keyed by category id."""
    explanations = {}
    assigned = 0
    last_index = len(result.categories) - 1
    for index, category in enumerate(result.categories):
        explanations[category.id] = explain_category(
            category,
            total=result.total,
            total_weight=result.total_weight,
            assigned_before=assigned,
            is_last=index == last_index,
        )
        assigned += category.share
    return explanations
