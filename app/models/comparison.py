from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

DifferenceType = Literal["addition", "deletion", "modification"]


class CompareRequest(BaseModel):
    # optional so a missing document answers 400, not 422
    doc1: Optional[str] = None
    doc2: Optional[str] = None


class Difference(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: DifferenceType
    content: str
    location: str = ""
    significance: str = ""


class ComparisonResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    differences: List[Difference]
    summary: str = ""
    impact_analysis: str = Field("", alias="impactAnalysis")


class DocumentInfo(BaseModel):
    text: str
    name: str
    type: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
