"""プロンプト改善APIルート"""
from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool
from enhancer.routes.schemas.prompt_enhancement import (
    EnhancePromptRequest,
    EnhancePromptResponse,
    ErrorResponse,
    TokenUsage,
)
from enhancer.utils.core import LOG_LEVEL
from enhancer.utils.errors import EnhancerError, UpstreamError
from enhancer.utils.prompt_enhancer import enhance_prompt, require_credential
from aws_lambda_powertools import Logger

logger = Logger(service="enhance_prompt_route", level=LOG_LEVEL)

router = APIRouter()


@router.post(
    "/api/enhance",
    response_model=EnhancePromptResponse,
    # 認証情報のチェックはリクエストボディの検証より先に行う
    dependencies=[Depends(require_credential)],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def enhance_prompt_endpoint(request: EnhancePromptRequest):
    """
    プロンプトを改善するエンドポイント

    Args:
        request: EnhancePromptRequest (prompt)

    Returns:
        EnhancePromptResponse (success, originalPrompt, enhancedPrompt, model, usage)
    """
    try:
        logger.info(
            "Received prompt enhancement request",
            extra={"prompt_length": len(request.prompt)},
        )

        # boto3 は同期APIのためスレッドプールで実行
        result = await run_in_threadpool(enhance_prompt, request.prompt)

        logger.info("Prompt enhancement completed successfully")

        return EnhancePromptResponse(
            original_prompt=result["original_prompt"],
            enhanced_prompt=result["enhanced_prompt"],
            model=result["model"],
            usage=TokenUsage(**result["usage"]),
        )

    except EnhancerError as e:
        logger.error(f"Prompt enhancement failed ({type(e).__name__}): {e.message}")
        raise
    except Exception as e:
        logger.error(f"Error in prompt enhancement: {str(e)}")
        raise UpstreamError(
            "An error occurred while enhancing the prompt. Please try again.",
            details=str(e),
        ) from e
