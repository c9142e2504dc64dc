# visadesk/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .engine import get_reference_constants
from .errors import install_error_handlers
from .logging_config import log_event
from .routes import visa
from .settings import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # fail at startup, not on the first request, if the default year has no schedule
    constants = get_reference_constants(settings.POLICY_YEAR)
    log_event("STARTUP", "reference constants loaded", {
        "policy_year": constants.policy_year,
        "label": constants.label,
        "ruleset_version": settings.RULESET_VERSION,
        "env": settings.ENV,
    })
    yield


app = FastAPI(title="VisaDesk Eligibility API", version=settings.APP_VERSION, lifespan=lifespan)
install_error_handlers(app)

app.include_router(visa.router)


@app.get("/")
def health():
    return {"status": "ok", "service": "visadesk", "version": settings.APP_VERSION}
