from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class Record(BaseModel):
    """One managed entry in the backing file."""
    model_config = ConfigDict(frozen=True, strict=True)

    id: str = ""
    email: str = ""
    age: int = 0

    @field_validator("id", "email", "age", mode="before")
    @classmethod
    def null_is_zero(cls, value, info: ValidationInfo):
        # JSON null leaves the field at its zero value
        if value is None:
            return cls.model_fields[info.field_name].default
        return value
