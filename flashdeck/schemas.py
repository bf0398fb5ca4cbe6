from pydantic import BaseModel


class ErrorOut(BaseModel):
    error: str


class HealthOut(BaseModel):
    status: str
