from django.contrib import admin

from .models import Course


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("title", "owner", "level", "published", "created_at")
    list_filter = ("level", "published")
    search_fields = ("title", "description", "owner__username")
