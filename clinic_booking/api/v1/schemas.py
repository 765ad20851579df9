from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from clinic_booking.domain.entities.booking_state import BookingDraft
from clinic_booking.domain.entities.selection_state import DEFAULT_PACKAGE, SelectionState
from clinic_booking.domain.entities.treatment import PricingOption, TreatmentSubcategory


class PricingOptionSchema(BaseModel):
    name: str
    price: float = Field(ge=0)

    def to_entity(self) -> PricingOption:
        return PricingOption(name=self.name, price=self.price)


class TreatmentSubcategorySchema(BaseModel):
    name: str
    image: str = ""
    pricing: list[PricingOptionSchema] = Field(default_factory=list)

    def to_entity(self) -> TreatmentSubcategory:
        return TreatmentSubcategory(
            name=self.name,
            image=self.image,
            pricing=tuple(p.to_entity() for p in self.pricing),
        )

    @staticmethod
    def from_entity(subcat: TreatmentSubcategory) -> "TreatmentSubcategorySchema":
        return TreatmentSubcategorySchema(
            name=subcat.name,
            image=subcat.image,
            pricing=[PricingOptionSchema(name=p.name, price=p.price) for p in subcat.pricing],
        )


class ServiceSchema(BaseModel):
    id: str
    name: str
    base_price: float
    description: str | None = None
    treatment_subcategories: list[TreatmentSubcategorySchema] = Field(default_factory=list)


class CreateServiceRequestSchema(BaseModel):
    name: str
    base_price: float = Field(ge=0)
    description: str | None = None
    treatment_options: Any = None
    session_options: Any = None


class DoctorSchema(BaseModel):
    id: str
    first_name: str
    last_name: str
    specialization: str | None = None


class SessionQuoteSchema(BaseModel):
    label: str
    session_count: int
    discount_percent: int
    per_session_price: float
    total_amount: float
    total_savings: float
    per_session_display: str
    total_display: str


class BookingOfferSchema(BaseModel):
    service: ServiceSchema
    has_treatment_subcategories: bool
    packages: list[SessionQuoteSchema] = Field(default_factory=list)
    doctors: list[DoctorSchema] = Field(default_factory=list)
    times_of_day: list[str] | None = None


class BookingDraftSchema(BaseModel):
    service_id: str
    doctor_id: str | None = None
    date: str | None = None
    time: str | None = None
    package: str = DEFAULT_PACKAGE
    selected_subcategories: dict[str, PricingOptionSchema | None] = Field(default_factory=dict)

    def to_entity(self) -> BookingDraft:
        subcategories = {
            name: option.to_entity() if option is not None else None
            for name, option in self.selected_subcategories.items()
        }
        return BookingDraft(
            service_id=self.service_id,
            doctor_id=self.doctor_id,
            date=self.date,
            time=self.time,
            selection=SelectionState(package=self.package, subcategories=subcategories),
        )


class SubmitBookingRequestSchema(BookingDraftSchema):
    address: str | None = None
    notes: str | None = None


class PricedSummarySchema(BaseModel):
    session_count: int
    unit_price: float
    discount_percent: int
    total_amount: float
    total_display: str


class OrderSchema(BaseModel):
    id: str
    service_id: str
    service_title: str
    package: str
    doctor_id: str
    booking_date: str
    booking_time: str
    status: str
    summary: PricedSummarySchema


class ServiceCatalogSchema(BaseModel):
    service_id: str
    service_name: str
    subcategories: list[TreatmentSubcategorySchema]


class SubcategoriesRequestSchema(BaseModel):
    subcategories: list[TreatmentSubcategorySchema] = Field(default_factory=list)
