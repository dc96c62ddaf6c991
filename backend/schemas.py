from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


# =========================
# REQUEST SCHEMA
# =========================
class JobSearchRequest(BaseModel):
    keywords: str = Field(..., examples=['nurse in "Boston" or "Cambridge"'])
    location: Optional[str] = Field(None, examples=["Boston, Cambridge"])
    industry: Optional[str] = Field(None, examples=["Healthcare"])
    token: Optional[str] = None

    def to_query_params(self) -> dict:
        """
        Query string for GET /api/jobs.
        A continuation token already encodes location/industry upstream.
        """
        params = {"q": self.keywords}
        if self.token:
            params["token"] = self.token
            return params

        if self.location:
            params["location"] = self.location
        if self.industry:
            params["industry"] = self.industry
        return params


# =========================
# SINGLE JOB ROW
# =========================
class ApplyLink(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    link: str = ""
    source: str = ""

    @field_validator("link", "source", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class JobResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = ""
    company_name: str = ""
    location: str = ""
    description: str = ""
    apply_link: str = ""
    apply_links: List[ApplyLink] = Field(default_factory=list)

    @field_validator(
        "title", "company_name", "location", "description", "apply_link",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("apply_links", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value


# =========================
# RESPONSE SCHEMA
# =========================
class SearchResponsePage(BaseModel):
    model_config = ConfigDict(frozen=True)

    jobs: List[JobResult] = Field(default_factory=list)
    next_page_token: Optional[str] = None

    @classmethod
    def from_payload(cls, data: dict) -> "SearchResponsePage":
        """Build a page from the SearchAPI body relayed by /api/jobs."""
        pagination = data.get("pagination")
        if not isinstance(pagination, dict):
            pagination = {}
        return cls(
            jobs=data.get("jobs") or [],
            next_page_token=pagination.get("next_page_token") or None,
        )


class ErrorResponse(BaseModel):
    error: str
