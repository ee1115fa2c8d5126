from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from checkmore.predicate.predicate import DEFAULT_VERIFY_MESSAGE


class CheckSettings(BaseModel):
    """
    Controls which variants the registrar derives for every predicate.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    maybe: bool = Field(True, description="Register maybe variants")
    negate: bool = Field(True, description="Register not variants")
    verify: bool = Field(True, description="Register verify variants and the explicit verifiers")
    verify_message: str = Field(
        DEFAULT_VERIFY_MESSAGE,
        min_length=1,
        description="Default message of derived verify variants. May reference {name}.",
    )

    @field_validator("verify_message", mode="after")
    @classmethod
    def _validate_template(cls, v: str) -> str:
        try:
            v.format(name="")
        except (KeyError, IndexError, ValueError) as e:
            msg = f"verify_message may only reference {{name}}: {v!r}"
            raise ValueError(msg) from e
        return v
