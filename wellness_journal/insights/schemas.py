from typing import List, Optional, Union
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class EntryInsight(BaseSchema):
    insight_text: str
    recommendations: List[str] = Field(default_factory=list)


class AnalyzeEntryRequest(BaseSchema):
    content: Optional[str] = None
    mood: Optional[str] = None
    activities: Optional[Union[str, List[str]]] = None


class AnalyzedEntry(BaseSchema):
    id: str
    ai_insights: str
    recommendations: List[str]


class AnalyzeEntryResponse(BaseSchema):
    entry: AnalyzedEntry


class ChatRequest(BaseSchema):
    message: Optional[str] = None
    context: Optional[str] = None


class ChatResponse(BaseSchema):
    response: str
