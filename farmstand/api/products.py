"""Product catalog endpoints."""

from uuid import UUID

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from farmstand.core.pipeline import wrap_async
from farmstand.core.views import views
from farmstand.models import CATEGORIES
from farmstand.services import ProductService

router = APIRouter()


def _redirect(url: str) -> RedirectResponse:
    # Browsers follow a 303 with GET whatever the original method
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/products")
@wrap_async
async def list_products(request: Request, category: str | None = None):
    """List products, optionally filtered by category."""
    if category:
        products = await run_in_threadpool(ProductService.find, category)
        return views.render(
            request, "products/index", {"products": products, "category": category}
        )

    products = await run_in_threadpool(ProductService.find)
    return views.render(
        request, "products/index", {"products": products, "category": "All"}
    )


# Must be registered before /products/{product_id}
@router.get("/products/new")
def new_product(request: Request):
    """Show the form for a new product."""
    return views.render(request, "products/new", {"categories": CATEGORIES})


@router.post("/products")
@wrap_async
async def create_product(request: Request):
    """Create a product from the submitted form."""
    form = await request.form()
    product = await run_in_threadpool(ProductService.save, dict(form))
    return _redirect(f"/products/{product.id}")


@router.get("/products/{product_id}")
@wrap_async
async def show_product(request: Request, product_id: UUID):
    """Show one product."""
    product = await run_in_threadpool(ProductService.find_by_id, product_id)
    return views.render(request, "products/show", {"product": product})


@router.get("/products/{product_id}/edit")
@wrap_async
async def edit_product(request: Request, product_id: UUID):
    """Show the edit form for a product."""
    product = await run_in_threadpool(ProductService.find_by_id, product_id)
    return views.render(
        request, "products/edit", {"product": product, "categories": CATEGORIES}
    )


@router.put("/products/{product_id}")
@wrap_async
async def update_product(request: Request, product_id: UUID):
    """Apply the submitted edit form, running validators on the patch."""
    form = await request.form()
    product = await run_in_threadpool(
        ProductService.find_by_id_and_update, product_id, dict(form)
    )
    return _redirect(f"/products/{product.id}")


@router.delete("/products/{product_id}")
@wrap_async
async def delete_product(request: Request, product_id: UUID):
    """Delete a product."""
    await run_in_threadpool(ProductService.find_by_id_and_delete, product_id)
    return _redirect("/products")
