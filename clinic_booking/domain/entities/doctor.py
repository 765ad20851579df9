from dataclasses import dataclass


@dataclass(frozen=True)
class Doctor:
    id: str
    first_name: str
    last_name: str
    specialization: str | None = None
    is_active: bool = True

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
