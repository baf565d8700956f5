"""URL routing for listfilter.

The catalogue lives under /courses/; the REST API and its docs are
mounted at the root by the api app.
"""
from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView


urlpatterns = [
    path("admin/", admin.site.urls),
    path("courses/", include("courses.urls")),
    path("", RedirectView.as_view(pattern_name="courses:list", permanent=False)),
    # API schema and docs
    path("", include("api.urls")),
]
