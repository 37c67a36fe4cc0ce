from django.urls import path

from .views import MedicineImageCacheView, MedicineImageView

urlpatterns = [
    path("medicine-image/", MedicineImageView.as_view(), name="medicine-image"),
    path("medicine-image/cache/", MedicineImageCacheView.as_view(), name="medicine-image-cache"),
]
