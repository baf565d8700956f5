from django.urls import path

from .views import course_list, course_detail, course_list_reset

app_name = "courses"

urlpatterns = [
    path("", course_list, name="list"),
    path("reset/", course_list_reset, name="reset"),
    path("<int:pk>/", course_detail, name="detail"),
]
