"""
Acknowledgement envelope returned by endpoints that do not answer
with an entity: successful creations and every structured error.
"""

from pydantic import BaseModel, ConfigDict, Field


class AckResponse(BaseModel):
    """``{"Message": ..., "Status": ...}`` envelope."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., alias="Message")
    status: int = Field(..., alias="Status", description="HTTP status code repeated in the body")
