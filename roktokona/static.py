"""Serve the prebuilt front-end bundle with a single-page-app fallback."""
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


class SPAStaticFiles(StaticFiles):
    """StaticFiles that answers unknown paths with the entry document."""

    def __init__(self, *args, index: str = "index.html", **kwargs):
        kwargs.setdefault("html", True)
        super().__init__(*args, **kwargs)
        self.index = index

    async def get_response(self, path: str, scope: Scope):
        try:
            response = await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response(self.index, scope)
        if response.status_code == 404:
            return await super().get_response(self.index, scope)
        return response
