"""Interface FileStorage - Puerto de almacenamiento de archivos."""

from abc import ABC, abstractmethod


class FileStorage(ABC):
    @abstractmethod
    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        """
        Sube un archivo y retorna su URL pública.

        Raises:
            ServicioExternoError: Si el almacenamiento rechaza o no responde.
        """
        raise NotImplementedError
