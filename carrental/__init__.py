"""In-memory car rental book-keeping: cars, customers, a rental service and an add-car form."""

__version__ = "0.1.0"
__all__ = ["app", "car", "customer", "form", "service"]