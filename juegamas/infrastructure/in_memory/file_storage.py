from juegamas.application.interfaces.file_storage import FileStorage


class InMemoryFileStorage(FileStorage):
    def __init__(self, base_url: str = "memory://storage") -> None:
        self._base_url = base_url.rstrip("/")
        self.archivos: dict[str, tuple[bytes, str]] = {}

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        self.archivos[path] = (content, content_type)
        return f"{self._base_url}/{path}"
