from fastapi import APIRouter, Depends, HTTPException
import httpx

from clinic_booking.api.v1.schemas import (
    ServiceCatalogSchema,
    SubcategoriesRequestSchema,
    TreatmentSubcategorySchema,
)
from clinic_booking.application.exceptions import InvalidSubcategoriesError, ServiceNotFoundError
from clinic_booking.application.use_cases.treatment_admin import TreatmentAdminUseCase
from clinic_booking.domain.entities.treatment import TreatmentSubcategory
from clinic_booking.wiring.dependencies import get_treatment_admin_use_case

router = APIRouter()


def _catalog_response(subcategories: list[TreatmentSubcategory]) -> list[TreatmentSubcategorySchema]:
    return [TreatmentSubcategorySchema.from_entity(s) for s in subcategories]


@router.get("/treatment-subcategories", response_model=list[ServiceCatalogSchema])
def list_catalogs(uc: TreatmentAdminUseCase = Depends(get_treatment_admin_use_case)):
    try:
        views = uc.list_catalogs()
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [
        ServiceCatalogSchema(
            service_id=v.service.id,
            service_name=v.service.name,
            subcategories=_catalog_response(v.subcategories),
        )
        for v in views
    ]


@router.put(
    "/services/{service_id}/treatment-subcategories",
    response_model=list[TreatmentSubcategorySchema],
)
def replace_subcategories(
    service_id: str,
    req: SubcategoriesRequestSchema,
    uc: TreatmentAdminUseCase = Depends(get_treatment_admin_use_case),
):
    try:
        saved = uc.replace_subcategories(service_id, [s.to_entity() for s in req.subcategories])
    except ServiceNotFoundError:
        raise HTTPException(status_code=404, detail="Service not found")
    except InvalidSubcategoriesError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _catalog_response(saved)


@router.post(
    "/services/{service_id}/treatment-subcategories",
    response_model=list[TreatmentSubcategorySchema],
)
def append_subcategories(
    service_id: str,
    req: SubcategoriesRequestSchema,
    uc: TreatmentAdminUseCase = Depends(get_treatment_admin_use_case),
):
    try:
        saved = uc.append_subcategories(service_id, [s.to_entity() for s in req.subcategories])
    except ServiceNotFoundError:
        raise HTTPException(status_code=404, detail="Service not found")
    except InvalidSubcategoriesError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except httpx.HTTPError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _catalog_response(saved)
