from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    status_code: int = Field(serialization_alias="statusCode")
    message: str
