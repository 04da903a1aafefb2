from typing import List, Literal, Optional, get_args
from pydantic import BaseModel, Field

MarkerStyle = Literal["➤", "🔹", "🌸", "✨", "💠", "🍀"]
MARKER_STYLES = get_args(MarkerStyle)

class ConvertOptions(BaseModel):
    add_markers: bool = True
    marker_style: MarkerStyle = "➤"
    split: bool = False
    max_chunk_size: int = 900

class Chunk(BaseModel):
    index: int = Field(..., ge=1)
    total: int = Field(..., ge=1)
    text: str
    length: int = Field(..., ge=0)

class ConversionResult(BaseModel):
    source: str
    text: str
    hashtags: List[str]
    chunks: List[Chunk] = Field(default_factory=list)
    max_chunk_size: Optional[int] = None
