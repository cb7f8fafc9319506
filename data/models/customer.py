from dataclasses import dataclass, field

from utils.time import get_utc_timestamp


@dataclass
class Customer:
    name: str
    account_id: str
    problem: str
    priority: int = 0
    arrived_at: str = field(default_factory=get_utc_timestamp)

    @classmethod
    def from_fields(cls, name: str, account_id: str, problem: str, priority: int = 0) -> "Customer":
        # Prompted input arrives with stray whitespace
        return cls(name=name.strip(), account_id=account_id.strip(), problem=problem.strip(), priority=priority)

    def __str__(self) -> str:
        return f"{self.name} ({self.account_id})  : {self.problem}"
