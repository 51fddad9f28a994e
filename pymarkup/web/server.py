from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from pymarkup.config import Settings
from .document import Document

Page = Callable[..., Union[Any, Awaitable[Any]]]


def _page_endpoint(page: Page, settings: Settings):
    async def endpoint(request: Request) -> HTMLResponse:
        # one Document (and render pass) per request
        document = Document(settings=settings)
        node = page(document, **request.path_params)
        if inspect.isawaitable(node):
            node = await node
        html = await document.render_to_dynamic_markup(node)
        return HTMLResponse(html)

    endpoint.__name__ = getattr(page, "__name__", "page")
    return endpoint


def create_fastapi_app(
    pages: Mapping[str, Page], *, settings: Optional[Settings] = None
) -> FastAPI:
    """Create a FastAPI app serving one rendered page per route.

    ``pages`` maps FastAPI route paths (``/posts/{slug}``) to page functions
    ``page(document, **path_params)`` returning the root node. The page may
    configure the document (title, metas, scripts) before returning.
    """
    settings = settings or Settings()
    app = FastAPI()
    for path, page in pages.items():
        app.add_api_route(
            path,
            _page_endpoint(page, settings),
            methods=["GET"],
            response_class=HTMLResponse,
        )
    return app
