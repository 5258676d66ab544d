from .pagination_service import PaginationParams, PaginationService

__all__ = ["PaginationParams", "PaginationService"]
