"""
Constraint violation reporting for bank account requests
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Union

from pydantic import BaseModel, ValidationError

from api.v1.schemas import CreateBankAccountRequest


@dataclass(frozen=True)
class ConstraintViolation:
    """A single field failing its declared rule"""
    
    message: str
    property_path: str
    
    def to_dict(self) -> dict:
        return {"message": self.message, "path": self.property_path}


def violations_from_errors(errors: Iterable[Mapping[str, Any]]) -> List[ConstraintViolation]:
    """
    Convert pydantic / FastAPI error dicts into constraint violations
    
    FastAPI prefixes body errors with a ``body`` location segment; it is
    dropped so paths match the request object graph.
    """
    violations = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        violations.append(
            ConstraintViolation(
                message=error["msg"],
                property_path=".".join(str(part) for part in loc)
            )
        )
    return violations


def validate(payload: Union[Mapping[str, Any], CreateBankAccountRequest]) -> List[ConstraintViolation]:
    """
    Validate a bank account creation request
    
    Args:
        payload: Wire payload (camelCase keys) or an already built request.
            Built requests are checked again since "past" depends on today.
    
    Returns:
        Constraint violations, empty when the request is valid
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    
    try:
        CreateBankAccountRequest.model_validate(payload)
    except ValidationError as e:
        return violations_from_errors(e.errors())
    
    return []
