from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

from medportal.config.constants import EntityKind
from medportal.config.settings import Settings, settings as default_settings
from medportal.core.auth import configure_password_hashing
from medportal.core.errors import register_exception_handlers
from medportal.core.middleware import log_requests_middleware
from medportal.db.seed import seed_store
from medportal.db.store import EntityStore

# -------------------------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------------------------
logging.basicConfig(
    level=default_settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[EntityStore] = None,
) -> FastAPI:
    """
    Build the API application.

    A fresh ``EntityStore`` is created at startup unless one is passed in; the
    store lives on ``app.state.store`` until shutdown. ``log_level`` and
    ``bcrypt_rounds`` of ``app_settings`` apply process-wide.
    """
    app_settings = app_settings or default_settings
    logging.getLogger("medportal").setLevel(app_settings.log_level.upper())
    configure_password_hashing(app_settings.bcrypt_rounds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ------------------------------------------------------------------ start‑up -----
        logger.info("Application startup …")
        entity_store = store if store is not None else EntityStore()
        if app_settings.seed_sample_data and entity_store.count(EntityKind.USER) == 0:
            logger.info("Seeding sample data...")
            seed_store(entity_store)
        app.state.store = entity_store
        logger.info("Entity store ready and stored in app state.")

        yield

        # ------------------------------------------------ shutdown --------
        logger.info("Application shutdown …")
        app.state.store = None
        logger.info("Shutdown complete")

    app = FastAPI(title=app_settings.app_name, lifespan=lifespan)

    # CORS -------------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(o) for o in app_settings.cors_origins],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests_middleware)
    register_exception_handlers(app)

    # ----------------------------------------------------------------- health‑check -----
    @app.get("/health")
    async def health_check(request: Request):
        entity_store = getattr(request.app.state, "store", None)
        counts = {}
        if entity_store is not None:
            counts = {kind.value: entity_store.count(kind) for kind in EntityKind}
        return {
            "status": "ok" if entity_store is not None else "starting",
            "records": counts,
        }

    # ------------------------------------------------------------------- routes ---------
    from medportal.routes.auth.router import router as auth_router
    from medportal.routes.users.router import router as users_router
    from medportal.routes.doctors.router import router as doctors_router
    from medportal.routes.hospitals.router import router as hospitals_router
    from medportal.routes.appointment.router import router as appointment_router
    from medportal.routes.medical_record.router import router as medical_record_router
    from medportal.routes.prescription.router import router as prescription_router
    from medportal.routes.message.router import router as message_router
    from medportal.routes.payment.router import router as payment_router

    for router in (
        auth_router,
        users_router,
        doctors_router,
        hospitals_router,
        appointment_router,
        medical_record_router,
        prescription_router,
        message_router,
        payment_router,
    ):
        app.include_router(router, prefix="/api")

    return app


# -------------------------------------------------------------------------------------
# FastAPI application instance
# -------------------------------------------------------------------------------------
app = create_app()
