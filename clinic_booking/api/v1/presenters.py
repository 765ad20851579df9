from __future__ import annotations

from clinic_booking.api.v1.schemas import (
    BookingOfferSchema,
    DoctorSchema,
    OrderSchema,
    PricedSummarySchema,
    ServiceSchema,
    SessionQuoteSchema,
    TreatmentSubcategorySchema,
)
from clinic_booking.application.use_cases.booking import BookingOffer
from clinic_booking.application.utils import treatment_catalog
from clinic_booking.application.utils.pricing import format_price
from clinic_booking.core.config import settings
from clinic_booking.domain.entities.order import OrderRecord
from clinic_booking.domain.entities.pricing import PricedSummary
from clinic_booking.domain.entities.service import Service


def service_schema(service: Service) -> ServiceSchema:
    return ServiceSchema(
        id=service.id,
        name=service.name,
        base_price=service.base_price,
        description=service.description,
        treatment_subcategories=[
            TreatmentSubcategorySchema.from_entity(s)
            for s in treatment_catalog.normalize(service.treatment_options)
        ],
    )


def summary_schema(summary: PricedSummary) -> PricedSummarySchema:
    return PricedSummarySchema(
        session_count=summary.session_count,
        unit_price=summary.unit_price,
        discount_percent=summary.discount_percent,
        total_amount=summary.total_amount,
        total_display=format_price(summary.total_amount, settings.CURRENCY_SYMBOL),
    )


def offer_schema(offer: BookingOffer) -> BookingOfferSchema:
    symbol = settings.CURRENCY_SYMBOL
    return BookingOfferSchema(
        service=service_schema(offer.service),
        has_treatment_subcategories=offer.has_treatment_subcategories,
        packages=[
            SessionQuoteSchema(
                label=q.label,
                session_count=q.session_count,
                discount_percent=q.discount_percent,
                per_session_price=q.per_session_price,
                total_amount=q.total_amount,
                total_savings=q.total_savings,
                per_session_display=format_price(q.per_session_price, symbol),
                total_display=format_price(q.total_amount, symbol),
            )
            for q in offer.packages
        ],
        doctors=[
            DoctorSchema(id=d.id, first_name=d.first_name, last_name=d.last_name, specialization=d.specialization)
            for d in offer.doctors
        ],
        times_of_day=offer.times_of_day,
    )


def order_schema(record: OrderRecord) -> OrderSchema:
    request = record.request
    return OrderSchema(
        id=record.id,
        service_id=request.service_id,
        service_title=request.service_title,
        package=request.package,
        doctor_id=request.doctor_id,
        booking_date=request.booking_date,
        booking_time=request.booking_time,
        status=request.status,
        summary=summary_schema(request.summary),
    )
