from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Dirección de entrega, normalizada igual que Recipient."""
    
    value: str = field(
        default="",
        metadata={"description": "Dirección completa en una sola línea"}
    )
    
    def __post_init__(self):
        object.__setattr__(self, "value", (self.value or "").strip())
    
    @classmethod
    def from_string(cls, value: Optional[str]) -> 'Address':
        return cls(value)
    
    def to_string(self) -> str:
        return self.value
    
    def __str__(self) -> str:
        return self.value
