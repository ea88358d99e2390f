"""Cart API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from ..models.cart import AddToCartRequest, CartLineOut, CartResponse
from ..models.item import Item
from ..models.pricing import PricingResult, ReportResponse
from ..services.report import format_report
from ..services.session import CartSession

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def get_session(request: Request) -> CartSession:
    """Cart session owned by the running application"""
    return request.app.state.session


def _cart_response(session: CartSession, message: Optional[str] = None) -> CartResponse:
    items = [CartLineOut(**line._asdict()) for line in session.entries()]
    return CartResponse(
        items=items,
        item_count=sum(line.quantity for line in items),
        message=message,
    )


@router.get("/items", response_model=CartResponse)
async def get_cart(session: CartSession = Depends(get_session)):
    """Get the cart contents"""
    return _cart_response(session)


@router.get("/items/{name}", response_model=CartLineOut)
async def get_cart_item(name: str, session: CartSession = Depends(get_session)):
    """Get a single cart line by item name"""
    line = session.store.get(name)
    if not line:
        raise HTTPException(status_code=404, detail="Item not in cart")
    return CartLineOut(**line._asdict())


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: CartSession = Depends(get_session),
):
    """Add one occurrence of an item to the cart"""
    session.add_to_cart(Item(name=request.name, unit_price=request.unit_price))
    return _cart_response(session, message=f"Added {request.name} to cart")


@router.delete("/items/{name}", response_model=CartResponse)
async def remove_from_cart(name: str, session: CartSession = Depends(get_session)):
    """Remove one occurrence of an item from the cart"""
    line = session.store.get(name)
    if not line:
        return _cart_response(session, message="Item not in cart")

    session.remove_from_cart(Item(name=name, unit_price=line.unit_price))
    return _cart_response(session, message="Item removed")


@router.delete("", response_model=CartResponse)
async def clear_cart(session: CartSession = Depends(get_session)):
    """Clear all items from cart"""
    session.clear()
    return _cart_response(session, message="Cart cleared")


@router.get("/total", response_model=PricingResult)
async def get_total(session: CartSession = Depends(get_session)):
    """Price the cart"""
    return session.price()


@router.get("/report", response_model=ReportResponse)
async def get_report(session: CartSession = Depends(get_session)):
    """Price the cart and return the plain-text report lines"""
    result = session.price()
    return ReportResponse(
        lines=format_report(result.total, result.category_discounts, session.cart_items())
    )
