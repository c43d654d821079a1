import uuid
from dataclasses import dataclass, field


def new_category_id() -> str:
    return uuid.uuid4().hex[:9]


@dataclass
class Category:
    label: str
    weight: int                   # instructor count, >= 1
    id: str = field(default_factory=new_category_id)
