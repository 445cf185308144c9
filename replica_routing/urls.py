from django.urls import path
from . import views

app_name = "replica_routing"

urlpatterns = [
    path("items/", views.items, name="items"),
]
