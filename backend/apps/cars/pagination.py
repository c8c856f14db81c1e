"""
Pagination for the car listing.
"""
import math

from django.conf import settings
from django.core.paginator import EmptyPage, Page, PageNotAnInteger
from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class CarPagination(PageNumberPagination):
    """
    Page number pagination answering with the ``{cars, meta: {pagination}}``
    envelope.

    Unusable page numbers read the first page. A page past the end is an
    empty page, not a 404.
    """

    page_size_query_param = 'page_size'

    @property
    def page_size(self):
        return getattr(settings, 'CARS_PAGE_SIZE', 10)

    @property
    def max_page_size(self):
        return getattr(settings, 'CARS_MAX_PAGE_SIZE', 100)

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        paginator = self.django_paginator_class(queryset, self.get_page_size(request))
        page_number = self.get_page_number(request, paginator)

        try:
            self.page = paginator.page(page_number)
        except PageNotAnInteger:
            self.page = paginator.page(1)
        except EmptyPage:
            # validate_number already accepted it as an integer
            number = int(page_number)
            if number < 1:
                self.page = paginator.page(1)
            else:
                self.page = Page([], number, paginator)

        return list(self.page)

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        return Response(
            {
                'cars': data,
                'meta': {
                    'pagination': {
                        'page': self.page.number,
                        'page_count': math.ceil(paginator.count / paginator.per_page),
                        'page_size': paginator.per_page,
                        'count': paginator.count,
                    },
                },
            },
            status=status.HTTP_200_OK
        )

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                'cars': schema,
                'meta': {
                    'type': 'object',
                    'properties': {
                        'pagination': {
                            'type': 'object',
                            'properties': {
                                'page': {'type': 'integer', 'example': 1},
                                'page_count': {'type': 'integer', 'example': 3},
                                'page_size': {'type': 'integer', 'example': 10},
                                'count': {'type': 'integer', 'example': 25},
                            },
                        },
                    },
                },
            },
        }
