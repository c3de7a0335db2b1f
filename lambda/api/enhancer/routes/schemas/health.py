from pydantic import BaseModel
from typing import Dict


class HealthCheckResponse(BaseModel):
    status: str
    timestamp: str


class ServiceInfoResponse(BaseModel):
    message: str
    version: str
    endpoints: Dict[str, str]
