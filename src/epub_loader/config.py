# epub_loader/src/epub_loader/config.py
"""
Configuration et constantes pour EPUB Loader
"""

import re

# ---------- Conteneur OCF ----------
MIMETYPE_PATH = "mimetype"
EPUB_MIMETYPE = "application/epub+zip"
CONTAINER_PATH = "META-INF/container.xml"
PACKAGE_MEDIA_TYPE = "application/oebps-package+xml"

# ---------- Noms d'éléments (sans préfixe d'abord, puis préfixe opf:) ----------
CONTAINER_NAMES = ("container",)
ROOTFILES_NAMES = ("rootfiles",)
ROOTFILE_NAMES = ("rootfile",)
PACKAGE_NAMES = ("package", "opf:package")
METADATA_NAMES = ("metadata", "opf:metadata")
MANIFEST_NAMES = ("manifest", "opf:manifest")
ITEM_NAMES = ("item", "opf:item")
SPINE_NAMES = ("spine", "opf:spine")
ITEMREF_NAMES = ("itemref", "opf:itemref")

# ---------- Espaces de noms ----------
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
OPF_NAMESPACE = "http://www.idpf.org/2007/opf"

# ---------- Expressions régulières ----------
ISBN_RE = re.compile(r"(?:(?:ISBN(?:-1[03])?:?\s*)?)(97[89][ -]?)?[0-9][0-9 -]{8,}[0-9Xx]")

# ---------- Configuration logging ----------
LOG_DIR = "logs"
LOG_FILENAME = "epub_loader.log"
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 5
LOG_ENCODING = "utf-8"

# ---------- Variables d'environnement ----------
LOG_LEVEL_ENV_VAR = "EPUB_LOADER_LOG_LEVEL"
