"""Static file serving for the exported directory."""

import os
from pathlib import PurePath

from fastapi.staticfiles import StaticFiles


class PublicStaticFiles(StaticFiles):
    """StaticFiles that hides dot-prefixed files and directories, such as .env."""

    def lookup_path(self, path: str) -> tuple[str, os.stat_result | None]:
        if any(part.startswith(".") for part in PurePath(path).parts):
            return "", None
        return super().lookup_path(path)
