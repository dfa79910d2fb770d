from typing import List
from pydantic import BaseModel, Field

from tweetsplit.core.chunking import segment

class Chunk(BaseModel):
    index: int = Field(..., ge=1)
    text: str
    length: int = Field(..., ge=0)

class SegmentReport(BaseModel):
    source: str
    max_length: int = Field(..., ge=1)
    chunks: List[Chunk]


def build_report(text: str, max_length: int, *, source: str = "<string>") -> SegmentReport:
    chunks = segment(text, max_length)
    return SegmentReport(
        source=source,
        max_length=max_length,
        chunks=[Chunk(index=i, text=c, length=len(c)) for i, c in enumerate(chunks, start=1)],
    )
