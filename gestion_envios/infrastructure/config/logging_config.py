import logging
import os
import sys


def configure_logging(log_file: str = "./assets/logs/gestion-envios.log", level: str = "INFO") -> None:
    """
    Configura el logging para la aplicación.
    
    Args:
        log_file: Ruta al archivo de log
        level: Nivel mínimo de los mensajes
    """
    # Asegurar que el directorio de logs exista
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stdout)
        ]
    )
