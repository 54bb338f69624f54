from dataclasses import dataclass
from typing import Dict, Mapping

from .constants import EMPLOYEE_EMAIL, EMPLOYEE_NAME, SECRET_CHILD_EMAIL, SECRET_CHILD_NAME
from .validator import normalize_email


@dataclass(frozen=True)
class Participant:
    """Data class for storing a single Secret Santa participant."""
    name: str
    email: str

    @property
    def key(self) -> str:
        """Identity used for matching: the trimmed, lower-cased email."""
        return normalize_email(self.email)

    @classmethod
    def from_record(cls, record: Mapping[str, str]) -> "Participant":
        return cls(name=record[EMPLOYEE_NAME], email=record[EMPLOYEE_EMAIL])


@dataclass(frozen=True)
class PreviousPairing:
    """A giver -> receiver edge from last year that must not happen again."""
    giver_email: str
    receiver_email: str

    def __post_init__(self):
        # Frozen, so normalize through object.__setattr__
        object.__setattr__(self, "giver_email", normalize_email(self.giver_email))
        object.__setattr__(self, "receiver_email", normalize_email(self.receiver_email))

    @classmethod
    def from_record(cls, record: Mapping[str, str]) -> "PreviousPairing":
        return cls(
            giver_email=record[EMPLOYEE_EMAIL],
            receiver_email=record[SECRET_CHILD_EMAIL],
        )


@dataclass(frozen=True)
class Assignment:
    """One generated pairing. Names and emails keep their original spelling."""
    giver_name: str
    giver_email: str
    receiver_name: str
    receiver_email: str

    def to_record(self) -> Dict[str, str]:
        """Returns the assignment as a row in the previous-year file layout."""
        return {
            EMPLOYEE_NAME: self.giver_name,
            EMPLOYEE_EMAIL: self.giver_email,
            SECRET_CHILD_NAME: self.receiver_name,
            SECRET_CHILD_EMAIL: self.receiver_email,
        }
