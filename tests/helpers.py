"""
Shared test data for bank account requests.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict


@dataclass(frozen=True)
class TestAccountHolder:
    """Known-valid account holder details."""

    __test__ = False

    account_holder_name: str
    date_of_birth: date
    passport_number: str

    def to_payload(self, **overrides: Any) -> Dict[str, Any]:
        """Wire payload (camelCase keys); overrides replace single fields."""
        payload = {
            "accountHolderName": self.account_holder_name,
            "dateOfBirth": self.date_of_birth,
            "passportNumber": self.passport_number,
        }
        payload.update(overrides)
        return payload

    def to_json(self, **overrides: Any) -> Dict[str, Any]:
        """JSON-safe payload for HTTP requests."""
        payload = self.to_payload(**overrides)
        if isinstance(payload["dateOfBirth"], date):
            payload["dateOfBirth"] = payload["dateOfBirth"].isoformat()
        return payload


JEFFERSON = TestAccountHolder(
    account_holder_name="Jefferson Condotta",
    date_of_birth=date(1988, 6, 24),
    passport_number="FH254787",
)

VIRGINIO = TestAccountHolder(
    account_holder_name="Virginio Condotta",
    date_of_birth=date(1917, 12, 11),
    passport_number="FH254788",
)

BLANK_VALUES = ["", " ", "   ", "\t", "\n", " \t\n "]

INVALID_LENGTH_PASSPORT_NUMBERS = ["", "F", "FH25478", "FH2547877", "FH254787FH254787"]
