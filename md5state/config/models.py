from typing import Literal

from pydantic import BaseModel, Field, model_validator

from md5state.policy import NONEXISTENT_PLACEHOLDER, Abort, Disposition, Omit, Policy, Substitute


class DispositionConfig(BaseModel):
    action: Literal["substitute", "omit", "abort"]
    text: str | None = None

    @model_validator(mode="after")
    def _substitute_needs_text(self) -> "DispositionConfig":
        if self.action == "substitute" and self.text is None:
            raise ValueError("action 'substitute' requires 'text'")
        return self

    def to_disposition(self) -> Disposition:
        if self.action == "substitute":
            return Substitute(self.text)
        if self.action == "omit":
            return Omit()
        return Abort()


class PolicyConfig(BaseModel):
    nonexistent: DispositionConfig = Field(
        default_factory=lambda: DispositionConfig(action="substitute", text=NONEXISTENT_PLACEHOLDER)
    )
    directory: DispositionConfig = Field(default_factory=lambda: DispositionConfig(action="omit"))
    unreadable: DispositionConfig = Field(default_factory=lambda: DispositionConfig(action="abort"))

    def to_policy(self) -> Policy:
        return Policy(
            nonexistent=self.nonexistent.to_disposition(),
            directory=self.directory.to_disposition(),
            unreadable=self.unreadable.to_disposition(),
        )


class Md5StateConfig(BaseModel):
    algorithm: str = "md5"
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
