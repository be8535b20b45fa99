import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ttest_tutor import __version__
from ttest_tutor.api.router import api_router
from ttest_tutor.config import settings
from ttest_tutor.models.common import ErrorResponse, HealthResponse
from ttest_tutor.stats.errors import PairedTTestError, ParseError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
    )


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Paired t-test Tutor",
        version=__version__,
        description="Step-by-step paired-samples t-test walkthroughs with APA write-ups",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.exception_handler(PairedTTestError)
    async def _analysis_error(request: Request, exc: PairedTTestError):
        # Unparseable uploads are a bad request; everything else is unprocessable data.
        status = 400 if isinstance(exc, ParseError) else 422
        body = ErrorResponse(**exc.to_dict()).model_dump(exclude_none=True)
        return JSONResponse(status_code=status, content=body)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(ok=True, version=__version__)

    logger.info("Paired t-test Tutor %s ready (alpha=%s)", __version__, settings.alpha)
    return app


app = create_app()
