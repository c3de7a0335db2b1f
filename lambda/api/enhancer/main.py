from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum
from aws_lambda_powertools import Logger

from enhancer.utils.core import API_TITLE, API_VERSION, ENVIRONMENT, LOG_LEVEL, PORT
from enhancer.utils.errors import EnhancerError, ValidationError

# Import routers
from enhancer.routes.health import router as health_router
from enhancer.routes.enhance_prompt import router as enhance_prompt_router


# ロギングの設定
logger = Logger(service="api_proxy", level=LOG_LEVEL)

INVALID_PROMPT_MESSAGE = (
    'Invalid request. Please provide a "prompt" string in the request body.'
)

# FastAPIアプリケーションの初期化
app = FastAPI(
    title=API_TITLE,
    description="Rewrites prompts into clearer, more specific prompts using Claude on Amazon Bedrock",
    version=API_VERSION,
)

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 本番環境では適切なオリジンを設定してください
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(health_router)
app.include_router(enhance_prompt_router)


@app.exception_handler(EnhancerError)
async def enhancer_exception_handler(request: Request, exc: EnhancerError):
    """Render API errors as {"success": false, "error": ...}"""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Exception handler for request body validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors as 400"""
    # Format the error messages
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(f"{field}: {error['msg']}")
    logger.error(f"Validation error: {'; '.join(errors)}")

    return await enhancer_exception_handler(
        request, ValidationError(INVALID_PROMPT_MESSAGE)
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error: {exc}")
    return JSONResponse(
        status_code=500, content={"success": False, "error": "Internal server error"}
    )


# Lambda handler
def lambda_handler(event, context):
    # Call the Mangum handler
    return Mangum(app)(event, context)


# Lambda handler
handler = lambda_handler


if __name__ == "__main__":
    import uvicorn

    logger.info(f"{API_TITLE} running on port {PORT}")
    logger.info(f"Environment: {ENVIRONMENT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
