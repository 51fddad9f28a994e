def run_web(pages, *, host=None, port=None, reload=False, settings=None, **uvicorn_kwargs):
    import uvicorn
    from pymarkup.config import load_settings
    from pymarkup.web.server import create_fastapi_app

    settings = settings or load_settings()
    fastapi_app = create_fastapi_app(pages, settings=settings)
    uvicorn.run(
        fastapi_app,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        **uvicorn_kwargs,
    )
