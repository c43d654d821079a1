"""Proportional trainee allocation: the core business engine."""

import numbers
from typing import Dict, Sequence

from models.allocation import AllocationRequest, AllocationResult, CategoryResult
from models.category import Category


class AllocationError(ValueError):
    """Base class for inputs the allocator refuses to distribute."""


class InvalidWeight(AllocationError):
    """Raised when the category list is empty or a weight is not a positive integer."""


class DegenerateTotal(AllocationError):
    """Raised when the weights sum to zero, leaving the average ratio undefined."""


class InvalidTotal(AllocationError):
    """Raised when the number of trainees is negative or not an integer."""


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _round_half_up(numerator: int, denominator: int) -> int:
    """round(numerator / denominator) with .5 rounded up, in exact integer arithmetic."""
    return (2 * numerator + denominator) // (2 * denominator)


def validate_request(categories: Sequence[Category], total: int) -> int:
    """Check allocator inputs and return the total weight."""
    if not _is_integer(total) or total < 0:
        raise InvalidTotal(f"Total trainees must be a non-negative integer, got {total!r}.")
    if not categories:
        raise InvalidWeight("At least one specialization is required.")

    for category in categories:
        if not _is_integer(category.weight) or category.weight < 1:
            raise InvalidWeight(
                f"Specialization '{category.label}' has invalid instructor count "
                f"{category.weight!r}; it must be a positive integer."
            )

    total_weight = sum(int(c.weight) for c in categories)
    if total_weight == 0:
        raise DegenerateTotal("Total instructor count is zero; the average ratio is undefined.")
    return total_weight


def allocate(categories: Sequence[Category], total: int) -> AllocationResult:
    """Split ``total`` trainees across ``categories`` in proportion to their weights.

    Every category except the last receives round(total * weight / total_weight),
    rounding halves up. The last category receives whatever remains so that the
    shares always sum to ``total``. A share is never allowed to exceed the
    remaining pool, which keeps every share non-negative when many small
    categories all round up.

    Reordering the categories changes which one absorbs the rounding remainder.
    """
    ordered = tuple(categories)
    total_weight = validate_request(ordered, total)
    total = int(total)

    remaining = total
    last_index = len(ordered) - 1
    results = []
    for index, category in enumerate(ordered):
        weight = int(category.weight)
        if index == last_index:
            share = remaining
        else:
            share = min(_round_half_up(total * weight, total_weight), remaining)
            remaining -= share

        results.append(CategoryResult(
            id=category.id,
            label=category.label,
            share=share,
            percentage=_round_half_up(100 * weight, total_weight),
            weight=weight,
            ratio=weight / total_weight,
        ))

    return AllocationResult(
        categories=tuple(results),
        total_weight=total_weight,
        total=total,
        average_ratio=total / total_weight,
    )


def run_allocation(request: AllocationRequest) -> AllocationResult:
    """Allocate a request snapshot."""
    return allocate(request.categories, request.total)


def rounded_share(total: int, weight: int, total_weight: int) -> int:
    """The share a non-last category receives before any remainder capping."""
    return _round_half_up(total * weight, total_weight)


def summarize_allocation(result: AllocationResult) -> Dict[str, object]:
    """Summary statistics shown alongside the distribution."""
    categories = result.categories
    largest = max(categories, key=lambda c: c.share)
    smallest = min(categories, key=lambda c: c.share)
    loads = [c.trainees_per_instructor for c in categories]

    return {
        "total": result.total,
        "total_weight": result.total_weight,
        "category_count": len(categories),
        "average_ratio": result.average_ratio,
        "largest_label": largest.label,
        "largest_share": largest.share,
        "smallest_label": smallest.label,
        "smallest_share": smallest.share,
        "max_load": max(loads),
        "min_load": min(loads),
        "load_spread": max(loads) - min(loads),
        "percentage_sum": result.percentage_sum,
    }
