"""
Get Products use case
"""
from catalog.domain.ports import ProductRepositoryPort
from catalog.repositories.unit_of_work import UnitOfWork
from catalog.shared.app_error import AppError
from catalog.shared.result import Result, fail, ok


class GetProductsUseCase:
    """
    Lists every product ordered by name

    An empty catalog is reported as PRODUCT_NOT_FOUND (404), not as an
    empty list.
    """

    def __init__(self, product_repository: ProductRepositoryPort, unit_of_work: UnitOfWork):
        self.product_repository = product_repository
        self.unit_of_work = unit_of_work

    def execute(self) -> Result:
        return self.unit_of_work.run(self._get_all)

    def _get_all(self, transaction) -> Result:
        products = self.product_repository.get_all(transaction)

        if not products:
            return fail(AppError(
                "PRODUCT_NOT_FOUND",
                "No products were found",
                404
            ))

        return ok(products)
