"""
Application container - explicit wiring of every dependency

Built once by create_app() and kept on app.state; nothing here is a
module-level singleton.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from catalog.core.config import Settings
from catalog.core.database import Database
from catalog.domain.ports import ProductRepositoryPort
from catalog.repositories.product_repository import ProductRepository
from catalog.repositories.unit_of_work import UnitOfWork
from catalog.services.create_product_use_case import CreateProductUseCase
from catalog.services.get_products_use_case import GetProductsUseCase
from catalog.services.product_service import ProductService


@dataclass
class Container:
    """Resolved dependency graph"""
    settings: Settings
    database: Optional[Database]
    unit_of_work: UnitOfWork
    product_repository: ProductRepositoryPort
    create_product_use_case: CreateProductUseCase
    get_products_use_case: GetProductsUseCase
    product_service: ProductService


def build_container(
    settings: Settings,
    database: Optional[Database] = None,
    unit_of_work: Optional[UnitOfWork] = None,
    product_repository: Optional[ProductRepositoryPort] = None
) -> Container:
    """
    Wire the application

    Any of database, unit_of_work or product_repository can be supplied to
    replace the default implementation (tests, scripts).
    """
    if unit_of_work is None:
        database = database or Database.from_settings(settings)
        unit_of_work = UnitOfWork(database)

    product_repository = product_repository or ProductRepository()

    create_product_use_case = CreateProductUseCase(product_repository, unit_of_work)
    get_products_use_case = GetProductsUseCase(product_repository, unit_of_work)

    return Container(
        settings=settings,
        database=database,
        unit_of_work=unit_of_work,
        product_repository=product_repository,
        create_product_use_case=create_product_use_case,
        get_products_use_case=get_products_use_case,
        product_service=ProductService(create_product_use_case, get_products_use_case),
    )


def get_container(request: Request) -> Container:
    """
    FastAPI dependency returning the app's container

    Usage:
        @router.get("/items")
        def read_items(container: Container = Depends(get_container)):
            ...
    """
    return request.app.state.container
