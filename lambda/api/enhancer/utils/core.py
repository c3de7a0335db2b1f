import os
from functools import lru_cache

import boto3
from botocore.client import Config
from dotenv import load_dotenv
from aws_lambda_powertools import Logger

# .env を読み込む（既存の環境変数は上書きしない）
load_dotenv()

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
logger = Logger(service="prompt_enhancer_api", level=LOG_LEVEL)

# サーバー設定
PORT = int(os.environ.get("PORT", "3000"))
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# Bedrock API キー（boto3 が bedrock-runtime の認証に直接使用する）
CREDENTIAL_ENV_VAR = "AWS_BEARER_TOKEN_BEDROCK"

BEDROCK_REGION = os.environ.get("BEDROCK_REGION", "us-east-1")
BEDROCK_MODEL_ID = os.environ.get(
    "BEDROCK_MODEL_ID", "anthropic.claude-3-5-sonnet-20241022-v2:0"
)
ANTHROPIC_VERSION = "bedrock-2023-05-31"
MAX_TOKENS = int(os.environ.get("MAX_TOKENS", "1024"))

API_TITLE = "Prompt Enhancer API"
API_VERSION = "1.0.0"


def get_api_credential() -> str:
    """Returns the configured Bedrock API key, or an empty string."""
    return os.environ.get(CREDENTIAL_ENV_VAR, "").strip()


@lru_cache(maxsize=1)
def get_bedrock_client():
    """bedrock-runtime クライアントを生成する（リトライなし）"""
    logger.info(f"Creating bedrock-runtime client in {BEDROCK_REGION}")
    return boto3.client(
        service_name="bedrock-runtime",
        region_name=BEDROCK_REGION,
        config=Config(retries={"max_attempts": 1, "mode": "standard"}),
    )
