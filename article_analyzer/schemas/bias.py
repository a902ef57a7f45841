"""
Schemas for bias analysis endpoints.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class BiasAnalyzeRequest(BaseModel):
    """
    Bias analysis request.
    POST /v1/bias/analyze

    Omitted detector flags fall back to the configured defaults. Unknown
    fields are ignored.
    """
    text: str = Field(..., description="Full article text to scan")
    subjective_intensifiers: Optional[bool] = Field(
        None, alias="subjectiveIntensifiers", description="Run the subjective intensifier detector"
    )
    factive_verbs: Optional[bool] = Field(
        None, alias="factiveVerbs", description="Run the factive verb detector"
    )
    include_html: bool = Field(False, alias="includeHtml", description="Also return highlighted HTML")

    class Config:
        populate_by_name = True


class BiasMatchOut(BaseModel):
    """A retained match."""
    term: str = Field(..., description="Text as it appears in the input")
    position: int = Field(..., description="Zero-based start offset into the input")
    end: int = Field(..., description="End offset (exclusive)")
    lexicon_term: str = Field(..., alias="lexiconTerm", description="Lexicon entry that matched")
    intensity: Optional[str] = Field(None, description="high, medium or low (intensifiers only)")

    class Config:
        populate_by_name = True


class IntensifierGroupOut(BaseModel):
    """Subjective intensifiers, split by intensity."""
    high: List[BiasMatchOut] = Field(default_factory=list)
    medium: List[BiasMatchOut] = Field(default_factory=list)
    low: List[BiasMatchOut] = Field(default_factory=list)
    count_high: int = Field(0, alias="countHigh")
    count_medium: int = Field(0, alias="countMedium")
    count_low: int = Field(0, alias="countLow")
    total: int = Field(0)

    class Config:
        populate_by_name = True


class FactiveGroupOut(BaseModel):
    """Factive verbs."""
    instances: List[BiasMatchOut] = Field(default_factory=list)
    count: int = Field(0)


class BiasAnalyzeResponse(BaseModel):
    """
    Bias analysis response.

    A detector group key is present only when that detector ran.
    """
    subjective_intensifiers: Optional[IntensifierGroupOut] = Field(None, alias="subjectiveIntensifiers")
    factive_verbs: Optional[FactiveGroupOut] = Field(None, alias="factiveVerbs")
    total: int = Field(0, description="Retained matches across all detectors")
    text_length: int = Field(..., alias="textLength", description="Characters scanned")
    html: Optional[str] = Field(None, description="Escaped text with <mark> highlights, if requested")

    class Config:
        populate_by_name = True


# Detector group -> category -> terms
LexiconResponse = Dict[str, Dict[str, List[str]]]
