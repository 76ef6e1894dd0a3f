# epub_loader/src/epub_loader/logging_setup.py
"""
Configuration du logging pour EPUB Loader.

La bibliothèque ne configure rien à l'import: c'est à l'application
d'appeler setup_logging() si elle le souhaite.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_ENCODING,
    LOG_FILENAME,
    LOG_LEVEL_ENV_VAR,
    LOG_MAX_BYTES,
)


def setup_logging(level: Optional[str] = None, log_dir: str = LOG_DIR) -> logging.Logger:
    """
    Configure le logger 'epub_loader' (fichier avec rotation + console).

    Args:
        level: Niveau du logger; par défaut la variable d'environnement
            EPUB_LOADER_LOG_LEVEL, sinon DEBUG
        log_dir: Dossier du fichier de log

    Returns:
        Le logger configuré
    """
    logger = logging.getLogger("epub_loader")
    logger.setLevel((level or os.getenv(LOG_LEVEL_ENV_VAR) or "DEBUG").upper())

    # Déjà configuré: ne pas dupliquer les handlers
    if logger.handlers:
        return logger

    # Handler pour fichier avec rotation
    os.makedirs(log_dir, exist_ok=True)
    logfile = os.path.join(log_dir, LOG_FILENAME)
    handler = RotatingFileHandler(
        logfile, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding=LOG_ENCODING
    )
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(threadName)s] %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Handler pour console
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console)

    return logger
