"""
main.py — FastAPI Entry Point for the Order Service

This module provides the REST API interface of the order service. It maps
HTTP requests onto OrderService calls and service errors onto status codes.

Responsibilities:
    • Accept single orders and order batches via HTTP API
    • Serve all orders and single orders by id
    • Translate service errors (400 client error, 500 storage error, 404 not found)
    • Provide system health information
"""

from fastapi import Depends, FastAPI, HTTPException
from typing import List

from . import config
from .exceptions import OrderServiceError, StorageFailureError
from .logging_config import get_logger, setup_logging
from .models import Order, OrderBatch
from .service import OrderService
from .store import create_order_store

# Initialization
# Configure logging, the order store and the FastAPI app
setup_logging()
log = get_logger(__name__)
app = FastAPI(title="Order Service")
order_service = OrderService(create_order_store(config.ORDER_STORE_BACKEND, config.ORDER_STORE_PATH))


def get_order_service() -> OrderService:
    """Dependency returning the application's OrderService instance."""
    return order_service


def _to_http_error(e: OrderServiceError) -> HTTPException:
    if isinstance(e, StorageFailureError):
        log.critical(f"Order Store Fehler: {e.message}")
        return HTTPException(status_code=500, detail=e.message)
    return HTTPException(status_code=400, detail=e.message)


@app.on_event("startup")
def on_startup():
    """Logs the active configuration when the application starts."""
    log.info(f"Order-Service startet (Store: {config.ORDER_STORE_BACKEND}).")


# API Endpoint: create a single order
@app.post("/api/orders", response_model=Order)
def create_order(order: Order, service: OrderService = Depends(get_order_service)):
    """
    Creates a new order.

    Args:
        order (Order): Submitted order. id and totalValue are assigned by the service.

    Returns:
        Order: The persisted order.

    Raises:
        HTTPException(400): If the order is invalid or a duplicate.
        HTTPException(500): If the order store fails.
    """
    log.info(f"Anfrage zum Anlegen einer Bestellung erhalten: {order}")
    try:
        return service.create_order(order)
    except OrderServiceError as e:
        raise _to_http_error(e)


@app.get("/api/orders", response_model=List[Order])
def get_all_orders(service: OrderService = Depends(get_order_service)):
    log.info("Anfrage: alle Bestellungen laden.")
    try:
        return service.get_all_orders()
    except OrderServiceError as e:
        raise _to_http_error(e)


@app.get("/api/orders/{order_id}", response_model=Order)
def get_order_by_id(order_id: int, service: OrderService = Depends(get_order_service)):
    """
    Returns a single order.

    Raises:
        HTTPException(404): If no order with this id exists.
    """
    log.info(f"[Order: {order_id}] Anfrage: Bestellung nach ID laden.")
    try:
        order = service.get_order_by_id(order_id)
    except OrderServiceError as e:
        raise _to_http_error(e)
    if order is None:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order


# API Endpoint: batch submission
@app.post("/api/orders/process-batch")
def process_high_volume_orders(orders: List[Order], service: OrderService = Depends(get_order_service)):
    """
    Processes a batch of orders sequentially, stopping at the first failure.

    Equal orders within the request body are processed once.

    Returns:
        dict: JSON response containing:
            - status (str): Completion message.
            - count (int): Number of orders created.

    Raises:
        HTTPException(400): If an order of the batch is invalid or a duplicate.
        HTTPException(500): If the order store fails.
    """
    batch = OrderBatch(orders)
    log.info(f"Anfrage: Batch mit {len(batch)} Bestellungen verarbeiten.")
    try:
        count = service.process_high_volume_orders(batch)
    except OrderServiceError as e:
        raise _to_http_error(e)
    return {"status": "Batch processing completed successfully", "count": count}


# Health Check Endpoint
@app.get("/health")
def health_check():
    """
    Simple health check endpoint.

    Returns:
        dict: A basic JSON object indicating service availability.
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.SERVICE_HOST, port=config.SERVICE_PORT)
