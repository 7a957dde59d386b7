from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rms_bracket.config import configure_logging, get_cors_origins
from rms_bracket.routes import brackets

APP_NAME = "RMS Bracket Engine API"

configure_logging()

app = FastAPI(title=APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Bracket engine (stateless: snapshot in, derived structure out)
app.include_router(brackets.router, prefix="/api", tags=["brackets"])


@app.get("/api/health")
def health_check():
    """Diagnostic endpoint to verify the service is up"""
    return {"app_name": APP_NAME, "status": "healthy"}
