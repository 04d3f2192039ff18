"""Pydantic schema for commit input from callers. Strict validation, no git access."""

from pydantic import BaseModel, Field, field_validator

from app_versioning.domain.models.commit import CommitAuthorship


class CommitRequest(BaseModel):
    """Commit message plus author identity for one save of an application."""

    message: str = Field(..., min_length=1, description="Commit message; must not be blank")
    author_name: str = Field(..., min_length=1)
    author_email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")

    @field_validator("message", "author_name")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def authorship(self) -> CommitAuthorship:
        return CommitAuthorship(name=self.author_name.strip(), email=self.author_email)
