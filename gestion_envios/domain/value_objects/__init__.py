"""
Value Objects para el dominio de envíos.

Este paquete contiene los objetos de valor (value objects) que representan
conceptos inmutables del dominio: el tipo de envío, el destinatario,
la dirección, el peso y los formatos de exportación.
"""
