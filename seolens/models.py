from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

STATUS_SUCCESS = "success"
STATUS_WARNING = "warning"
STATUS_ERROR = "error"
STATUSES = (STATUS_SUCCESS, STATUS_WARNING, STATUS_ERROR)

PRIORITY_HIGH = "high"
PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"
PRIORITIES = (PRIORITY_HIGH, PRIORITY_MEDIUM, PRIORITY_LOW)


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    # Optional wire fields are omitted rather than sent as null
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class Finding:
    name: str
    status: str  # success | warning | error
    value: Optional[str] = None
    message: Optional[str] = None

    def __post_init__(self):
        if self.status not in STATUSES:
            raise ValueError(f"Unknown finding status: {self.status!r}")

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "value": self.value, "status": self.status, "message": self.message})


@dataclass(frozen=True)
class CategoryResult:
    score: int
    items: Tuple[Finding, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "items": [item.to_dict() for item in self.items]}


@dataclass(frozen=True)
class GooglePreview:
    title: str
    url: str
    description: str
    title_length: int
    description_length: int
    is_title_length_optimal: bool
    is_description_length_optimal: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "description": self.description,
            "titleLength": self.title_length,
            "descriptionLength": self.description_length,
            "isTitleLengthOptimal": self.is_title_length_optimal,
            "isDescriptionLengthOptimal": self.is_description_length_optimal,
        }


@dataclass(frozen=True)
class SocialPreview:
    title: str
    description: str
    is_open_graph_complete: bool
    is_twitter_card_complete: bool
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "isOpenGraphComplete": self.is_open_graph_complete,
            "isTwitterCardComplete": self.is_twitter_card_complete,
        })


@dataclass(frozen=True)
class Previews:
    google: GooglePreview
    social: SocialPreview

    def to_dict(self) -> Dict[str, Any]:
        return {"google": self.google.to_dict(), "social": self.social.to_dict()}


@dataclass(frozen=True)
class Recommendation:
    priority: str  # high | medium | low
    title: str
    description: str
    code: Optional[str] = None

    def __post_init__(self):
        if self.priority not in PRIORITIES:
            raise ValueError(f"Unknown recommendation priority: {self.priority!r}")

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"priority": self.priority, "title": self.title, "description": self.description, "code": self.code})


@dataclass(frozen=True)
class AnalysisSummary:
    """The part of an analysis that is kept for the recent-analyses list."""

    url: str
    total_score: int
    meta_tags_score: int
    social_media_score: int
    technical_seo_score: int
    analyzed_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "totalScore": self.total_score,
            "metaTagsScore": self.meta_tags_score,
            "socialMediaScore": self.social_media_score,
            "technicalSeoScore": self.technical_seo_score,
            "analyzedAt": self.analyzed_at,
        }


@dataclass(frozen=True)
class AnalysisResult:
    url: str
    analyzed_at: str
    total_score: int
    score_rating: str
    meta_tags: CategoryResult
    social_media: CategoryResult
    technical_seo: CategoryResult
    previews: Previews
    recommendations: Tuple[Recommendation, ...] = field(default_factory=tuple)

    def summary(self) -> AnalysisSummary:
        return AnalysisSummary(
            url=self.url,
            total_score=self.total_score,
            meta_tags_score=self.meta_tags.score,
            social_media_score=self.social_media.score,
            technical_seo_score=self.technical_seo.score,
            analyzed_at=self.analyzed_at,
        )

    def categories(self) -> List[Tuple[str, CategoryResult]]:
        return [("metaTags", self.meta_tags), ("socialMedia", self.social_media), ("technicalSeo", self.technical_seo)]

    def to_dict(self) -> Dict[str, Any]:
        report = {
            "url": self.url,
            "analyzedAt": self.analyzed_at,
            "totalScore": self.total_score,
            "scoreRating": self.score_rating,
        }
        for key, category in self.categories():
            report[key] = category.to_dict()
        report["previews"] = self.previews.to_dict()
        report["recommendations"] = [rec.to_dict() for rec in self.recommendations]
        return report
