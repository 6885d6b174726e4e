"""Image Data Transfer Objects."""

from pydantic import BaseModel, ConfigDict, Field


class PasteImageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(alias="imageUrl")
