from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Recipient:
    """Destinatario de una entrega.
    
    El nombre se normaliza al construir: se recortan los espacios y un valor
    nulo o en blanco queda como cadena vacía. Nunca lanza excepciones; el
    rechazo de destinatarios vacíos es tarea del ValidationService.
    """
    
    name: str = field(
        default="",
        metadata={"description": "Nombre del destinatario, sin espacios al inicio ni al final"}
    )
    
    def __post_init__(self):
        object.__setattr__(self, "name", (self.name or "").strip())
    
    @classmethod
    def from_string(cls, name: Optional[str]) -> 'Recipient':
        """Crea un destinatario a partir de una cadena de texto."""
        return cls(name)
    
    def to_string(self) -> str:
        """Devuelve el nombre normalizado."""
        return self.name
    
    def __str__(self) -> str:
        return self.name
