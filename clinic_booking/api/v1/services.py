from fastapi import APIRouter, Depends, HTTPException
import httpx

from clinic_booking.api.v1.presenters import offer_schema, service_schema
from clinic_booking.api.v1.schemas import BookingOfferSchema, CreateServiceRequestSchema, ServiceSchema
from clinic_booking.application.exceptions import ServiceNotFoundError
from clinic_booking.application.ports.service_catalog import ServiceCatalogPort
from clinic_booking.application.use_cases.booking import BookingUseCase
from clinic_booking.wiring.dependencies import get_booking_use_case, get_service_catalog

router = APIRouter()


@router.get("/services", response_model=list[ServiceSchema])
def list_services(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    try:
        services = catalog.list_services()
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [service_schema(s) for s in services]


@router.post("/services", response_model=ServiceSchema, status_code=201)
def create_service(
    req: CreateServiceRequestSchema,
    catalog: ServiceCatalogPort = Depends(get_service_catalog),
):
    try:
        service = catalog.create_service(req.model_dump(mode="json", exclude_none=True))
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return service_schema(service)


@router.get("/services/{service_id}/offer", response_model=BookingOfferSchema)
def get_offer(service_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        offer = uc.get_offer(service_id)
    except ServiceNotFoundError:
        raise HTTPException(status_code=404, detail="Service not found")
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return offer_schema(offer)
