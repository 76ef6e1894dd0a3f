# epub_loader/src/epub_loader/core/exceptions.py
"""
Exceptions spécifiques au chargement EPUB.

Chaque erreur identifie précisément l'étape du chargement qui a échoué.
Aucune n'est réessayée: elles sont toutes terminales pour le chargement
ou la lecture en cours.
"""


class EpubError(Exception):
    """Exception de base pour toutes les erreurs EPUB."""
    pass


class ArchiveOpenError(EpubError):
    """Levée quand l'archive ne peut pas être ouverte ou décompressée.

    Attributes:
        source: Source de l'archive (chemin ou objet fichier)
        original_error: Erreur sous-jacente (I/O ou format ZIP)
    """
    def __init__(self, source, original_error: Exception = None):
        reason = str(original_error) if original_error is not None else "unknown error"
        super().__init__(f"Could not load {source} ({reason})")
        self.source = source
        self.original_error = original_error


class ContainerError(EpubError):
    """Violation du contrat du conteneur OCF."""
    pass


class EmptyArchiveError(ContainerError):
    """L'archive ne contient aucune entrée."""
    def __init__(self, message: str = "No files found in epub"):
        super().__init__(message)


class MimetypeMissingError(ContainerError):
    """L'entrée 'mimetype' est absente."""
    def __init__(self, message: str = "Mimetype not found"):
        super().__init__(message)


class UnexpectedMimetypeError(ContainerError):
    """Le contenu de l'entrée 'mimetype' n'est pas celui attendu.

    Attributes:
        mimetype: Valeur réellement lue
    """
    def __init__(self, mimetype: str):
        super().__init__(f"Unexpected mimetype ({mimetype})")
        self.mimetype = mimetype


class ContainerMissingError(ContainerError):
    """L'entrée META-INF/container.xml est absente."""
    def __init__(self, message: str = "Container file not found"):
        super().__init__(message)


class RootfileNotFoundError(ContainerError):
    """Le descripteur de conteneur ne déclare aucun rootfile."""
    def __init__(self, message: str = "Rootfile not found"):
        super().__init__(message)


class PackagePathNotFoundError(ContainerError):
    """Aucun rootfile n'a le bon media-type et un full-path non vide."""
    def __init__(self, message: str = "Could not get full path of root file"):
        super().__init__(message)


class PackageFileMissingError(ContainerError):
    """Le document de package désigné n'existe pas dans l'archive.

    Attributes:
        path: Chemin déclaré par le rootfile
    """
    def __init__(self, path: str):
        super().__init__(f"Root file not found ({path})")
        self.path = path


class XmlParsingError(EpubError):
    """Levée quand un document XML de l'archive est illisible.

    Attributes:
        original_error: Erreur de parsing sous-jacente
        content_preview: Les 200 premiers caractères du contenu fautif
    """
    def __init__(self, message: str, original_error: Exception = None, content_preview: str = None):
        super().__init__(message)
        self.original_error = original_error
        self.content_preview = content_preview


class EntryNotFoundError(EpubError):
    """Aucune entrée de l'archive ne correspond exactement au chemin demandé.

    Attributes:
        path: Chemin demandé
    """
    def __init__(self, path: str):
        super().__init__(f"File {path} not found")
        self.path = path


class ManifestIdNotFoundError(EpubError):
    """Aucun item du manifest ne porte l'identifiant demandé.

    Attributes:
        item_id: Identifiant demandé
    """
    def __init__(self, item_id: str):
        super().__init__(f"Id {item_id} not found")
        self.item_id = item_id
