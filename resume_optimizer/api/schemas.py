"""API request/response schemas."""

from pydantic import AliasChoices, BaseModel, Field, HttpUrl, field_validator, model_validator


class OptimizeRequest(BaseModel):
    resume_file_b64: str = Field(min_length=1, description="Base64 encoded PDF resume")
    job_description: str | None = Field(default=None, description="Job description text")
    job_url: HttpUrl | None = Field(
        default=None,
        validation_alias=AliasChoices("job_url", "linkedin_job_url"),
        description="Job posting URL to fetch the description from",
    )

    @field_validator("job_description", mode="before")
    @classmethod
    def blank_description_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def check_job_source(self) -> "OptimizeRequest":
        if self.job_description is None and self.job_url is None:
            raise ValueError("Either job_description or job_url must be provided.")
        if self.job_description is not None and self.job_url is not None:
            raise ValueError("Provide only one of job_description or job_url.")
        return self


class OptimizeResponse(BaseModel):
    optimized_resume: str
    summary: str
