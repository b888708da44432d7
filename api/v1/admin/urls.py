"""
URL configuration for admin console endpoints.

Mounted under ``api/v1/admin/<locale>/``.
"""

from django.urls import path

from api.v1.admin import views

urlpatterns = [
    path(
        "products",
        views.ProductListView.as_view(),
        name="admin-products",
    ),
    path(
        "products/<str:product_id>",
        views.ProductDetailView.as_view(),
        name="admin-product-detail",
    ),
    path(
        "assets/images",
        views.ImageUploadView.as_view(),
        name="admin-image-upload",
    ),
    path(
        "form-options",
        views.FormOptionsView.as_view(),
        name="admin-form-options",
    ),
    path(
        "dashboard",
        views.DashboardView.as_view(),
        name="admin-dashboard",
    ),
]
