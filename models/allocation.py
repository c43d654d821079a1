from dataclasses import dataclass
from typing import Tuple

from models.category import Category


@dataclass(frozen=True)
class AllocationRequest:
    categories: Tuple[Category, ...]
    total: int          # trainees to distribute, >= 0


@dataclass(frozen=True)
class CategoryResult:
    id: str
    label: str
    share: int          # trainees assigned
    percentage: int     # round(ratio * 100), informational only
    weight: int         # instructor count
    ratio: float        # weight / total_weight

    @property
    def trainees_per_instructor(self) -> float:
        return self.share / self.weight


@dataclass(frozen=True)
class AllocationResult:
    categories: Tuple[CategoryResult, ...]
    total_weight: int
    total: int
    average_ratio: float  # total / total_weight

    @property
    def percentage_sum(self) -> int:
        """Percentages are rounded independently and need not sum to 100."""
        return sum(c.percentage for c in self.categories)
