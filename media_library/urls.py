from django.urls import path
from . import views

app_name = "media_library"

urlpatterns = [
    path("upload/", views.upload_image, name="upload"),
    path("admin/media/", views.admin_media, name="admin_media"),
]
