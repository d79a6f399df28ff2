import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class DateKind(str, Enum):
    REGISTERED = "registered"
    MODIFIED = "modified"

class ListItem(BaseModel):
    id: str = Field(description="Source-specific item identifier, unique within one listing page")
    title: str
    date: Optional[dt.date] = Field(description="Captured date, None when the source text could not be parsed")
    detail_url: str = Field(description="Canonical URL of the item's detail page")
    date_kind: DateKind = Field(default=DateKind.REGISTERED, description="Which timestamp `date` represents")

class DetailRecord(BaseModel):
    content: str = Field(description="Detail body converted to markdown")
    has_attachment: bool = False
    has_embedded_image: bool = False

class CacheStats(BaseModel):
    size: int
    urls: List[str] = Field(default_factory=list)

class Timing(BaseModel):
    fetch: int = Field(description="Milliseconds spent fetching the page")
    parse: int = Field(description="Milliseconds spent in the parser")
    total: int

class ListInspection(BaseModel):
    url: str
    html: str
    items: List[ListItem]
    timing: Timing
    cached: bool

class DetailInspection(BaseModel):
    url: str
    html: str
    article: DetailRecord
    timing: Timing
    cached: bool
