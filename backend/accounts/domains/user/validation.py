"""
Request validation.

Shape and type rules live on the pydantic schemas; the functions here add
the rules that need the store (email uniqueness) and turn both kinds of
failure into one field -> messages map.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from accounts.domains.user.repository import user_repository
from accounts.domains.user.schemas import UserCreate, UserUpdate

EMAIL_TAKEN = "The email has already been taken."


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


def errors_to_dict(errors: Iterable[FieldError]) -> Dict[str, List[str]]:
    result: Dict[str, List[str]] = {}
    for error in errors:
        result.setdefault(error.field, []).append(error.message)
    return result


def from_request_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """Convert pydantic/FastAPI error dicts (loc, msg, type) into FieldErrors."""
    field_errors = []
    for error in errors:
        # JSON decode errors carry a character offset, not a field name
        loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        field = ".".join(loc) if loc else "body"
        if error.get("type") == "missing":
            message = f"The {field} field is required."
        else:
            message = error.get("msg", "Invalid value.")
        field_errors.append(FieldError(field, message))
    return field_errors


async def validate_create(session: AsyncSession, data: UserCreate) -> List[FieldError]:
    errors = []
    if await user_repository.email_exists(session, data.email):
        errors.append(FieldError("email", EMAIL_TAKEN))
    return errors


async def validate_update(session: AsyncSession, user_id: str, data: UserUpdate) -> List[FieldError]:
    # The user's own current email is allowed
    errors = []
    if await user_repository.email_exists(session, data.email, exclude_user_id=user_id):
        errors.append(FieldError("email", EMAIL_TAKEN))
    return errors
