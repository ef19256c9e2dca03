from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.hello.routes import router as hello_router
from config import settings
import logging

# Configure logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hello API",
    description="FastAPI demo service with a greeting endpoint and an integer sum endpoint",
    version="1.0.0",
    debug=settings.DEBUG
)

# Add CORS middleware to allow requests from the frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],  # Use env var
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(hello_router, prefix="/hello")

logger.info(f"Hello API configured for {settings.APP_ENV} environment")
