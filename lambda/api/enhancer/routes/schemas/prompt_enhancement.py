"""プロンプト改善APIのスキーマ定義"""
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnhancePromptRequest(BaseModel):
    prompt: StrictStr = Field(..., min_length=1, description="改善する元のプロンプト")


class TokenUsage(CamelModel):
    input_tokens: int = Field(..., description="入力トークン数")
    output_tokens: int = Field(..., description="出力トークン数")


class EnhancePromptResponse(CamelModel):
    success: bool = True
    original_prompt: str = Field(..., description="元のプロンプト")
    enhanced_prompt: str = Field(..., description="改善されたプロンプト")
    model: str = Field(..., description="Bedrockが返したモデルID")
    usage: TokenUsage


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[str] = None
