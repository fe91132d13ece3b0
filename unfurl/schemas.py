from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List

class FetchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Text of the page <title>")
    text: str = Field(description="Plain text excerpt of the page body")
    images: List[str] = Field(default_factory=list, description="Absolute image URLs, in page order")
    metas: Dict[str, str] = Field(default_factory=dict, description="Resolved meta values by field name")

class FetchRequest(BaseModel):
    url: str
