"""
==============================================================================
Company Catalog Endpoints
==============================================================================

The company portfolio: products the company actually sells and installs,
curated from the reference library.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query

from product_library.catalog.catalog import ProductCatalog
from product_library.core import exceptions
from product_library.core.dependencies import get_product_catalog
from product_library.schemas.common import to_json_list
from product_library.schemas.product import ImportRequest, PortfolioUpdate


router = APIRouter(prefix="/company", tags=["Company Catalog"])


class CompanyCatalogController:
    """Controller for company catalog operations."""

    def __init__(self, catalog: ProductCatalog):
        self._catalog = catalog

    def get_portfolio(self) -> dict:
        products = self._catalog.company_portfolio()
        return {"success": True, "total": len(products), "products": to_json_list(products)}

    def get_candidates(self, q: str) -> dict:
        """Reference products that can be imported."""
        products = self._catalog.import_candidates(q)
        return {
            "success": True,
            "query": q,
            "total": len(products),
            "products": to_json_list(products),
        }

    def import_products(self, body: ImportRequest) -> dict:
        """Add the selected reference products to the company catalog."""
        if not body.ids:
            raise exceptions.empty_selection()

        imported = self._catalog.import_selected(body.ids)
        return {
            "success": True,
            "imported": [p.id for p in imported],
            "total": len(self._catalog.company_portfolio()),
        }

    def update_portfolio(self, body: PortfolioUpdate) -> dict:
        """Merge the edited portfolio back into the library."""
        demoted = self._catalog.reconcile_portfolio(body.products)
        portfolio = self._catalog.company_portfolio()
        return {
            "success": True,
            "demoted": [p.id for p in demoted],
            "total": len(portfolio),
            "products": to_json_list(portfolio),
        }


@router.get("/portfolio")
async def get_portfolio(catalog: ProductCatalog = Depends(get_product_catalog)):
    """List products in the company catalog."""
    return CompanyCatalogController(catalog).get_portfolio()


@router.put("/portfolio")
async def update_portfolio(
    body: PortfolioUpdate,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """
    Reconcile an edited portfolio.

    Products left out of the body are moved back to the reference list.
    Products unknown to the library are ignored.
    """
    return CompanyCatalogController(catalog).update_portfolio(body)


@router.get("/candidates")
async def get_candidates(
    q: str = Query("", max_length=200),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Search the reference list for products to import."""
    return CompanyCatalogController(catalog).get_candidates(q)


@router.post("/import")
async def import_products(
    body: ImportRequest,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Import selected reference products."""
    return CompanyCatalogController(catalog).import_products(body)
