"""Excepciones del dominio de envíos.

Todas heredan de DomainError, que a su vez es un ValueError: son fallos de
validación de la entrada y los adaptadores las traducen a errores de cliente.
Los mensajes están pensados para mostrarse al usuario final.
"""

from typing import Any


class DomainError(ValueError):
    """Error de validación del dominio."""


class InvalidWeightError(DomainError):
    """Peso no positivo o no finito."""

    def __init__(self, weight: Any):
        self.weight = weight
        super().__init__(f"Peso inválido: {weight}. O peso deve ser maior que zero.")


class InvalidAddressError(DomainError):
    """Dirección nula o vacía."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(
            f"Endereço inválido: '{address}'. O endereço não pode ser nulo ou vazio."
        )


class InvalidRecipientError(DomainError):
    """Destinatario nulo o vacío."""

    def __init__(self, recipient: str):
        self.recipient = recipient
        super().__init__(
            f"Destinatário inválido: '{recipient}'. O destinatário não pode ser nulo ou vazio."
        )


class UnsupportedShippingTypeError(DomainError):
    """Código o tipo de envío desconocido."""

    def __init__(self, shipping_type: str):
        self.shipping_type = shipping_type
        super().__init__(f"Tipo de frete não suportado: '{shipping_type}'.")


class MissingArgumentError(DomainError):
    """Falta un argumento obligatorio para construir un objeto del dominio."""

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(f"Argumento obrigatório ausente: '{argument_name}'.")
