"""REST API v1 for the course catalogue."""
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from courses.filters import CourseListFilter
from courses.models import Course
from .pagination import DefaultPagination
from .serializers import CourseSerializer, NeighboursSerializer


class CourseViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Course.objects.select_related("owner").all()
    serializer_class = CourseSerializer
    pagination_class = DefaultPagination
    filterset_fields = ["level", "published", "owner"]
    search_fields = ["title", "description", "owner__username"]
    ordering_fields = ["created_at", "updated_at", "title"]

    @extend_schema(responses=NeighboursSerializer)
    @action(detail=True, methods=["get"])
    def neighbours(self, request, pk=None):
        """Previous/next course ids in the list last filtered on the site."""
        course = self.get_object()
        component = CourseListFilter(request)
        prev_id, next_id = component.prev_next(course.pk)
        payload = NeighboursSerializer({"previous": prev_id, "next": next_id, "query": component.query()})
        return Response(payload.data)
