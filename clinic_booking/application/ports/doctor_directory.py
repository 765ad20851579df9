from __future__ import annotations

from abc import ABC, abstractmethod

from clinic_booking.domain.entities.doctor import Doctor


class DoctorDirectoryPort(ABC):
    @abstractmethod
    def list_doctors(self) -> list[Doctor]:
        raise NotImplementedError

    @abstractmethod
    def get_doctor(self, doctor_id: str) -> Doctor | None:
        raise NotImplementedError
