"""
URL configuration for public catalog endpoints.
"""

from django.urls import path

from api.v1.catalog import views

urlpatterns = [
    path(
        "products",
        views.BrowseCatalogView.as_view(),
        name="browse-catalog",
    ),
    path(
        "categories",
        views.ListCategoriesView.as_view(),
        name="list-categories",
    ),
]
