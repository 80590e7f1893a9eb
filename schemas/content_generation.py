from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class GenerationRequest(BaseModel):
    prompt: str = Field(min_length=1)
    region: str = Field(min_length=1)
    ophthalmology_keywords: list[str] = Field(min_length=1)
    # Free-form; only a truthy "name" key is ever read.
    hospital_info: Any = None


class PackageContent(BaseModel):
    title: str
    body: str
    hashtags: list[str]
    call_to_action: str


class PackageMetadata(BaseModel):
    character_count: int
    estimated_reading_time: int
    platform_categories: list[str]
    seo_score: int


class ContentPackage(BaseModel):
    platform: str
    content: PackageContent
    metadata: PackageMetadata


class ComplianceReport(BaseModel):
    overall_compliance: str
    mfds_compliance: bool
    mohw_compliance: bool
    kftc_compliance: bool
    medical_act_compliance: bool
    violations: list[str]
    required_disclaimers: list[str]


class KeywordScore(BaseModel):
    keyword: str
    density: float
    position: str


class KeywordAnalysis(BaseModel):
    primary_keywords: list[KeywordScore]


class EngagementPrediction(BaseModel):
    expected_ctr: float
    expected_engagement_rate: float


class SEOAnalysis(BaseModel):
    naver_seo_score: int
    google_seo_score: int
    keyword_analysis: KeywordAnalysis
    readability_score: int
    engagement_prediction: EngagementPrediction


class ContentSafetyCheck(BaseModel):
    passed: bool
    flags: list[str]


class GenerationMetadata(BaseModel):
    request_id: str
    timestamp: str
    processing_time: float
    model_version: str
    content_safety_check: ContentSafetyCheck


class GenerationResponse(BaseModel):
    content_packages: list[ContentPackage]
    compliance_report: ComplianceReport
    seo_analysis: SEOAnalysis
    generation_metadata: GenerationMetadata


class ErrorBody(BaseModel):
    code: str
    message: str
    details: str | None = None
    timestamp: str | None = None


class ErrorEnvelope(BaseModel):
    error: ErrorBody
