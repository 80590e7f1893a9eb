"""Assemble the fixed-shape generation response around the model's text.

Scores, densities and compliance flags are fixed placeholder values. Nothing
here analyses the generated text beyond measuring its length.
"""

from __future__ import annotations

import math
import time

from app.core.errors import utc_timestamp
from schemas.content_generation import (
    ComplianceReport,
    ContentPackage,
    ContentSafetyCheck,
    EngagementPrediction,
    GenerationMetadata,
    GenerationRequest,
    GenerationResponse,
    KeywordAnalysis,
    KeywordScore,
    PackageContent,
    PackageMetadata,
    SEOAnalysis,
)

PLATFORM = "naver_blog"
PLATFORM_CATEGORIES = ["건강", "의료"]
TITLE_SUFFIX = "전문의가 알려드리는 정보"
DEFAULT_CALL_TO_ACTION = "전문의 상담 예약"
REQUIRED_DISCLAIMERS = [
    "개인에 따라 치료 결과가 다를 수 있습니다.",
    "정확한 진단을 위해서는 전문의와 상담하시기 바랍니다.",
]
READING_CHARS_PER_MINUTE = 500
MODEL_VERSION = "gpt-4-turbo"

SEO_SCORE = 85
GOOGLE_SEO_SCORE = 82
READABILITY_SCORE = 78
KEYWORD_DENSITY = 2.1
EXPECTED_CTR = 3.2
EXPECTED_ENGAGEMENT_RATE = 5.8
PROCESSING_TIME = 2.5


def build_title(region: str, keywords: list[str]) -> str:
    return f"{region} {', '.join(keywords)} - {TITLE_SUFFIX}"


def build_call_to_action(request: GenerationRequest) -> str:
    hospital_info = request.hospital_info
    name = hospital_info.get("name") if isinstance(hospital_info, dict) else None
    if name:
        return f"{name} 상담 예약"
    return DEFAULT_CALL_TO_ACTION


def new_request_id() -> str:
    return f"req_{time.time_ns() // 1_000_000}"


def build_generation_response(request: GenerationRequest, generated: str) -> GenerationResponse:
    keywords = request.ophthalmology_keywords
    character_count = len(generated)

    package = ContentPackage(
        platform=PLATFORM,
        content=PackageContent(
            title=build_title(request.region, keywords),
            body=generated,
            hashtags=[f"#{keyword}" for keyword in keywords],
            call_to_action=build_call_to_action(request),
        ),
        metadata=PackageMetadata(
            character_count=character_count,
            estimated_reading_time=math.ceil(character_count / READING_CHARS_PER_MINUTE),
            platform_categories=list(PLATFORM_CATEGORIES),
            seo_score=SEO_SCORE,
        ),
    )

    return GenerationResponse(
        content_packages=[package],
        compliance_report=ComplianceReport(
            overall_compliance="compliant",
            mfds_compliance=True,
            mohw_compliance=True,
            kftc_compliance=True,
            medical_act_compliance=True,
            violations=[],
            required_disclaimers=list(REQUIRED_DISCLAIMERS),
        ),
        seo_analysis=SEOAnalysis(
            naver_seo_score=SEO_SCORE,
            google_seo_score=GOOGLE_SEO_SCORE,
            keyword_analysis=KeywordAnalysis(
                primary_keywords=[
                    KeywordScore(keyword=keyword, density=KEYWORD_DENSITY, position="title")
                    for keyword in keywords
                ]
            ),
            readability_score=READABILITY_SCORE,
            engagement_prediction=EngagementPrediction(
                expected_ctr=EXPECTED_CTR,
                expected_engagement_rate=EXPECTED_ENGAGEMENT_RATE,
            ),
        ),
        generation_metadata=GenerationMetadata(
            request_id=new_request_id(),
            timestamp=utc_timestamp(),
            processing_time=PROCESSING_TIME,
            model_version=MODEL_VERSION,
            content_safety_check=ContentSafetyCheck(passed=True, flags=[]),
        ),
    )
