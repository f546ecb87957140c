from dataclasses import dataclass, field


def format_decimal_ptbr(value, places: int = 2) -> str:
    """Formatea un número con la coma decimal usada en pt-BR (sin separador de miles)."""
    return f"{value:.{places}f}".replace(".", ",")


@dataclass(frozen=True)
class Weight:
    """Peso del paquete en kilogramos.
    
    El valor se guarda tal cual, incluso si es cero, negativo o no finito.
    """
    
    value: float = field(
        metadata={"description": "Peso en kilogramos"}
    )
    
    @classmethod
    def from_float(cls, value: float) -> 'Weight':
        return cls(value)
    
    def to_float(self) -> float:
        return self.value
    
    def to_string(self) -> str:
        """Representación con dos decimales, por ejemplo "2,50 kg"."""
        return f"{format_decimal_ptbr(self.value)} kg"
    
    def __str__(self) -> str:
        return self.to_string()
