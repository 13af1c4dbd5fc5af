from collections.abc import Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.responses import error_response
from app.api.routes import router
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.processor import Processor, build_processor

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
}


def create_app(
    settings: Settings | None = None,
    processor: Processor | None = None,
) -> FastAPI:
    """Build the HTTP app: settings -> logging -> pipeline capabilities -> routes."""
    settings = settings or Settings()
    Log.configure(settings.log_level)

    app = FastAPI(
        title="Cureon Report Service",
        description="Explains uploaded medical reports in patient-friendly terms",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.processor = processor or build_processor(settings)
    app.include_router(router)

    @app.middleware("http")
    async def cors(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(_request: Request, exc: Exception) -> JSONResponse:
        Log.exception(f"Unhandled request error: {exc}")
        # Sent by ServerErrorMiddleware, outside the cors middleware.
        response = error_response(500, "unexpected error", str(exc))
        response.headers.update(CORS_HEADERS)
        return response

    Log.info(f"Report service ready (env={settings.app_env})")
    return app


def main() -> None:
    """Entry point: load settings and serve the app with uvicorn."""
    settings = Settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.http_host,
        port=settings.http_port,
    )


if __name__ == "__main__":
    main()
