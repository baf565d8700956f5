"""Serializers for the read-only catalogue API."""
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from courses.models import Course

User = get_user_model()


class OwnerSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "username")


class CourseSerializer(serializers.ModelSerializer):
    owner = OwnerSerializer(read_only=True)

    class Meta:
        model = Course
        fields = ("id", "title", "description", "level", "published", "owner", "created_at", "updated_at")
        read_only_fields = fields


class NeighboursSerializer(serializers.Serializer):
    """Previous/next ids around a course in the remembered list."""

    previous = serializers.IntegerField(allow_null=True)
    next = serializers.IntegerField(allow_null=True)
    query = serializers.CharField(allow_blank=True)
