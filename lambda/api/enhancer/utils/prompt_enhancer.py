"""プロンプト改善ユーティリティ"""
import json
from typing import Any, Dict, List

from botocore.exceptions import BotoCoreError, ClientError
from aws_lambda_powertools import Logger

from enhancer.utils.core import (
    ANTHROPIC_VERSION,
    BEDROCK_MODEL_ID,
    CREDENTIAL_ENV_VAR,
    LOG_LEVEL,
    MAX_TOKENS,
    get_api_credential,
    get_bedrock_client,
)
from enhancer.utils.errors import (
    AuthError,
    ConfigurationError,
    EnhancerError,
    RateLimitError,
    UpstreamError,
)

logger = Logger(service="prompt_enhancer", level=LOG_LEVEL)

INSTRUCTION_TEMPLATE = """You are an expert prompt engineer. Your task is to enhance and improve the following prompt to make it more effective, clear, and actionable.

Original prompt: "{prompt}"

Please provide an enhanced version of this prompt that:
1. Is more specific and detailed
2. Includes clear instructions and context
3. Specifies the desired output format if applicable
4. Removes ambiguity

Return ONLY the enhanced prompt, without any explanation or preamble."""

AUTH_ERROR_CODES = {
    "UnrecognizedClientException",
    "AccessDeniedException",
    "ExpiredTokenException",
    "InvalidSignatureException",
}
RATE_LIMIT_ERROR_CODES = {
    "ThrottlingException",
    "TooManyRequestsException",
    "ServiceQuotaExceededException",
}


def build_instruction(prompt: str) -> str:
    """元のプロンプトを改善指示文に埋め込む"""
    # str.format は prompt 内の波括弧を解釈しない
    return INSTRUCTION_TEMPLATE.format(prompt=prompt)


def extract_enhanced_text(content: List[Dict[str, Any]]) -> str:
    """
    レスポンスの最初のコンテンツブロックからテキストを取り出す

    The first block is used only when it is a text block; anything else
    (tool_use, image, an empty list) yields an empty string.
    """
    if not content:
        return ""
    first = content[0]
    if first.get("type") == "text":
        return first.get("text", "")
    return ""


def require_credential() -> None:
    """Raises ConfigurationError when no Bedrock API key is configured."""
    if not get_api_credential():
        raise ConfigurationError(
            f"{CREDENTIAL_ENV_VAR} environment variable is not configured."
        )


def classify_upstream_error(error: Exception) -> EnhancerError:
    """
    Bedrock呼び出しの例外をAPIエラーに変換する

    Args:
        error: boto3 / botocore から送出された例外

    Returns:
        EnhancerError: AuthError (401), RateLimitError (429) or UpstreamError (500)
    """
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code", "")
        status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        if status == 401 or code in AUTH_ERROR_CODES:
            return AuthError(f"Unauthorized. Invalid {CREDENTIAL_ENV_VAR}.")
        if status == 429 or code in RATE_LIMIT_ERROR_CODES:
            return RateLimitError("Rate limited. Please try again later.")

    return UpstreamError(
        "An error occurred while enhancing the prompt. Please try again.",
        details=str(error),
    )


def enhance_prompt(original_prompt: str) -> Dict[str, Any]:
    """
    Bedrock (Claude) を使用してプロンプトを改善する

    Args:
        original_prompt: 元のプロンプト

    Returns:
        Dict[str, Any]: {
            'original_prompt': 元のプロンプト,
            'enhanced_prompt': 改善されたプロンプト,
            'model': モデルID,
            'usage': {'input_tokens': int, 'output_tokens': int}
        }

    Raises:
        ConfigurationError: APIキー未設定
        AuthError / RateLimitError / UpstreamError: Bedrock API呼び出しエラー
    """
    require_credential()

    logger.info(f"Enhancing prompt: {original_prompt[:50]}...")

    request_body = {
        "anthropic_version": ANTHROPIC_VERSION,
        "max_tokens": MAX_TOKENS,
        "messages": [
            {
                "role": "user",
                "content": build_instruction(original_prompt),
            }
        ],
    }

    try:
        response = get_bedrock_client().invoke_model(
            modelId=BEDROCK_MODEL_ID,
            body=json.dumps(request_body),
            contentType="application/json",
            accept="application/json",
        )
        response_body = json.loads(response["body"].read())
        enhanced_prompt = extract_enhanced_text(response_body.get("content", []))
        usage = response_body["usage"]
        model = response_body.get("model", BEDROCK_MODEL_ID)
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Bedrock API error: {str(e)}")
        raise classify_upstream_error(e) from e
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed Bedrock response: {str(e)}")
        raise classify_upstream_error(e) from e

    logger.info(
        "Prompt enhanced successfully",
        extra={
            "model": model,
            "input_tokens": usage.get("input_tokens", 0),
            "output_tokens": usage.get("output_tokens", 0),
        },
    )

    return {
        "original_prompt": original_prompt,
        "enhanced_prompt": enhanced_prompt,
        "model": model,
        "usage": {
            "input_tokens": usage.get("input_tokens", 0),
            "output_tokens": usage.get("output_tokens", 0),
        },
    }
