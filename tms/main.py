"""
TMS FastAPI Main Application
Entry point for the TMS validation REST API
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tms.api.v1.api_router import api_router
from tms.core.config import settings
from tms.core.database import check_db_connection, init_db
from tms.core.exceptions import CustomerCodeCollisionError, CustomRuleError, ValidationError
from tms.core.logging import get_logger, setup_logging
from tms.schemas.common import ValidationFailedResponse
from tms.validation import FormModule, VALIDATION_RULES

logger = get_logger("main")

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    ## TMS Validation API

    Field and form validation for the Transportation Management System.

    ### Key Features:
    - **Rule Catalog**: Aadhaar, PAN, GST, IFSC, mobile, bank and vehicle identifiers
    - **Form Validation**: Required, format and cross-field checks per module,
      ordered by on-screen field position
    - **Bulk Validation**: Row-numbered errors for uploaded batches
    - **Customer Codes**: Abbreviation-plus-sequence code generation
    """,
    docs_url=settings.DOCS_URL,
    redoc_url=settings.REDOC_URL,
    openapi_url=settings.OPENAPI_URL,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/health", tags=["System"])
async def health_check():
    """
    Health check endpoint for monitoring and load balancers

    Returns system status and database connectivity
    """
    try:
        db_status = check_db_connection()

        return {
            "status": "healthy" if db_status else "degraded",
            "version": settings.APP_VERSION,
            "database": "connected" if db_status else "disconnected",
            "debug": settings.DEBUG
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(status_code=503, detail="Service unavailable")


# System information endpoint
@app.get("/info", tags=["System"])
async def system_info():
    """
    System information endpoint
    """
    return {
        "application": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "api_version": "v1",
        "docs_url": settings.DOCS_URL,
        "modules": [module.value for module in FormModule],
        "rules": sorted(VALIDATION_RULES),
    }


# Application startup event
@app.on_event("startup")
async def startup_event():
    """
    Configure logging and create the customer master table
    """
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    try:
        init_db()
        logger.info("Application startup completed successfully")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise


# Application shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down application")


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """
    Submitted form failed validation: HTTP 400 with the ordered errors
    """
    result = exc.result
    if result is None:
        body = ValidationFailedResponse(errors={}, details=str(exc))
    else:
        data = result.to_dict()
        body = ValidationFailedResponse(
            errors=data["errors"],
            error_list=data["error_list"],
            first_invalid_field=data["first_invalid_field"],
            summary=data["summary"],
        )
    return JSONResponse(status_code=400, content=body.model_dump())


@app.exception_handler(CustomRuleError)
async def custom_rule_exception_handler(request: Request, exc: CustomRuleError):
    """
    A custom rule crashed: generic retry message, details only in the log
    """
    logger.error(f"Custom rule failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Validation error, please retry",
            "detail": str(exc) if settings.DEBUG else None,
            "type": "custom_rule_error"
        }
    )


@app.exception_handler(CustomerCodeCollisionError)
async def collision_exception_handler(request: Request, exc: CustomerCodeCollisionError):
    logger.warning(f"Customer code collision: {exc}")
    return JSONResponse(
        status_code=409,
        content={
            "error": "Customer code conflict",
            "detail": str(exc),
            "type": "customer_code_collision"
        }
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.DEBUG else "An unexpected error occurred",
            "type": "server_error"
        }
    )


# Include API routers
app.include_router(api_router, prefix=settings.API_V1_STR)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tms.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
