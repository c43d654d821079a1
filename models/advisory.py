from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AdvisoryReport:
    summary: str
    recommendations: Tuple[str, ...] = ()
    efficiency_score: int = 0   # 0-100
    is_fallback: bool = False
