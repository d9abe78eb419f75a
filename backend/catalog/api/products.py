"""
Products API Endpoints
Create and list catalog products

Author: TM3
Date: 2025-10-03
Updated: 2025-10-17 (refactor: use cases + unit of work behind ProductService)
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from catalog.core.container import Container, get_container
from catalog.services.product_service import ProductService
from catalog.shared.result import Result

logger = logging.getLogger(__name__)

router = APIRouter()

REQUIRED_FIELDS = ("name", "price", "stock")


def get_product_service(container: Container = Depends(get_container)) -> ProductService:
    return container.product_service


def _error_response(result: Result, default_status: int) -> JSONResponse:
    error = result.error
    status_code = getattr(error, "http_code", None) or default_status
    return JSONResponse(
        status_code=status_code,
        content={
            "code": getattr(error, "code", "INTERNAL_ERROR"),
            "message": getattr(error, "message", str(error))
        }
    )


def _has_missing_fields(payload: Dict[str, Any]) -> bool:
    # An empty name counts as missing; price/stock only when absent
    return not payload.get("name") or any(field not in payload for field in REQUIRED_FIELDS[1:])


@router.post("", status_code=201)
def create_product(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ProductService = Depends(get_product_service)
):
    """
    Create a product

    Body: {"name": str, "price": number, "stock": int}

    Returns the created product with its generated id (201)
    """
    payload = payload or {}

    if _has_missing_fields(payload):
        return JSONResponse(
            status_code=400,
            content={
                "code": "MISSING_FIELDS",
                "message": "The fields name, price and stock are required"
            }
        )

    result = service.create({field: payload[field] for field in REQUIRED_FIELDS})

    if result.is_failure:
        logger.info(f"Product not created: {result.error}")
        return _error_response(result, 400)

    return JSONResponse(status_code=201, content=result.value.to_dict())


@router.get("")
def get_products(service: ProductService = Depends(get_product_service)):
    """
    List every product ordered by name

    An empty catalog answers 404 PRODUCT_NOT_FOUND
    """
    result = service.get_all()

    if result.is_failure:
        if result.error.is_code("PRODUCT_NOT_FOUND"):
            return _error_response(result, 404)
        return _error_response(result, 500)

    return [product.to_dict() for product in result.value]
