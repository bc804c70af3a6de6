from fastapi import APIRouter, Depends

from autorent.domain.errors import NotFoundError
from autorent.entrypoints.http.dependencies import (
    get_add_vehicle_to_cart_use_case,
    get_cart_ledger,
)
from autorent.entrypoints.http.dtos.cart import (
    CartItemRequestDTO,
    CartItemResponseDTO,
    CartResponseDTO,
    CheckoutRequestDTO,
    CheckoutResponseDTO,
)
from autorent.entrypoints.http.error_responses import ErrorResponse
from autorent.entrypoints.http.mappers.cart_mapper import CartMapper
from autorent.use_cases.add_vehicle_to_cart import AddVehicleToCart, AddVehicleToCartRequest
from autorent.use_cases.cart_ledger import CartLedger


router = APIRouter(tags=["Cart"])


def _cart_response(ledger: CartLedger) -> CartResponseDTO:
    return CartMapper.to_response(ledger.items, ledger.totals())


@router.get(
    "/cart",
    response_model=CartResponseDTO,
    summary="Current cart",
    description="""
    Rentals selected by the browser profile named in `X-Profile-Id`.

    Totals are derived from the line items on every read; each line item keeps
    the price per day it had when it was added.
    """,
)
def get_cart(ledger: CartLedger = Depends(get_cart_ledger)) -> CartResponseDTO:
    return _cart_response(ledger)


@router.put(
    "/cart/items/{car_id}",
    response_model=CartItemResponseDTO,
    summary="Book a car",
    description="""
    Add a car to the cart, or replace the existing rental for the same car.

    ## Rental days
    - Values outside 1..30 are clamped

    ## Example
    ```
    PUT /v1/cart/items/2
    {"days": 3, "start_date": "2025-06-01"}
    ```
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        422: {"model": ErrorResponse, "description": "Car not available or invalid terms"},
    },
)
def put_cart_item(
    car_id: str,
    body: CartItemRequestDTO,
    use_case: AddVehicleToCart = Depends(get_add_vehicle_to_cart_use_case),
) -> CartItemResponseDTO:
    """Book endpoint following parse → execute → map → return pattern."""
    request = AddVehicleToCartRequest(
        vehicle_id=car_id,
        days=CartMapper.to_rental_days(body),
        start_date=body.start_date,
    )

    item = use_case.execute(request)

    return CartMapper.to_item_response(item)


@router.patch(
    "/cart/items/{car_id}",
    response_model=CartItemResponseDTO,
    summary="Change rental terms",
    description="Change days and start date of a rental already in the cart. The locked price is kept.",
    responses={404: {"model": ErrorResponse, "description": "Car is not in the cart"}},
)
def patch_cart_item(
    car_id: str,
    body: CartItemRequestDTO,
    ledger: CartLedger = Depends(get_cart_ledger),
) -> CartItemResponseDTO:
    item = ledger.update(car_id, CartMapper.to_rental_days(body), body.start_date)
    if item is None:
        raise NotFoundError("CartItem", car_id)
    return CartMapper.to_item_response(item)


@router.delete(
    "/cart/items/{car_id}",
    response_model=CartResponseDTO,
    summary="Remove a rental",
    description="Removing a car that is not in the cart leaves the cart unchanged.",
)
def delete_cart_item(
    car_id: str,
    ledger: CartLedger = Depends(get_cart_ledger),
) -> CartResponseDTO:
    ledger.remove(car_id)
    return _cart_response(ledger)


@router.delete("/cart", response_model=CartResponseDTO, summary="Empty the cart")
def delete_cart(ledger: CartLedger = Depends(get_cart_ledger)) -> CartResponseDTO:
    ledger.clear()
    return _cart_response(ledger)


@router.post(
    "/cart/checkout",
    response_model=CheckoutResponseDTO,
    summary="Confirm the booking",
    description="""
    Returns the booked rentals and empties the cart.

    The body is optional; without it the booking is paid by card.
    """,
    responses={422: {"model": ErrorResponse, "description": "Cart is empty"}},
)
def checkout(
    body: CheckoutRequestDTO | None = None,
    ledger: CartLedger = Depends(get_cart_ledger),
) -> CheckoutResponseDTO:
    options = body or CheckoutRequestDTO()
    receipt = ledger.checkout(options.payment_method)
    return CartMapper.to_checkout_response(receipt)
