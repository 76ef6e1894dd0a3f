# epub_loader/src/epub_loader/core/models.py
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .xml_tree import XmlNode


@dataclass(frozen=True)
class ManifestItem:
    """Item du manifest: attributs de l'élément <item> copiés tels quels."""

    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get("id")

    @property
    def href(self) -> Optional[str]:
        return self.attributes.get("href")

    @property
    def media_type(self) -> Optional[str]:
        return self.attributes.get("media-type")

    @property
    def properties(self) -> Tuple[str, ...]:
        return tuple((self.attributes.get("properties") or "").split())


@dataclass(frozen=True)
class PackageDocument:
    """Modèle de données pour le document de package (fichier OPF) résolu."""

    path: str
    base_dir: str = ""

    # Bloc de métadonnées opaque (None si absent)
    metadata: XmlNode | None = None

    manifest: Tuple[ManifestItem, ...] = ()
    # idref de chaque itemref, dans l'ordre de lecture
    spine: Tuple[Optional[str], ...] = ()

    version: str | None = None


@dataclass(frozen=True)
class FileContent:
    """Résultat d'une lecture par identifiant: chemin résolu et contenu."""

    path: str
    content: bytes
