"""Shared model types."""

from datetime import datetime, timezone
from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, BaseModel, ValidationError

from estate_admin.utils.errors import EntityValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps in stored payloads were written as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_model(model: type[ModelT], data: Any) -> ModelT:
    """Validate caller input, raising EntityValidationError on bad fields."""
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise EntityValidationError(f"Invalid {model.__name__}: {e}") from e
