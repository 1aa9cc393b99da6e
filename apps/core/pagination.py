"""
Pagination classes for API endpoints.

Provides consistent pagination across all list endpoints.
"""

from django.conf import settings

from rest_framework.pagination import PageNumberPagination


class StandardPagination(PageNumberPagination):
    """
    Default page-number pagination.

    Clients may ask for a smaller or larger page with ``page_size``,
    capped at ``max_page_size``.
    """

    page_size = 50
    page_size_query_param = "page_size"
    max_page_size = 100


class ReportPagination(StandardPagination):
    """Pagination for the report order list."""

    def get_page_size(self, request):
        self.page_size = settings.POS_REPORT_PAGE_SIZE
        return super().get_page_size(request)
