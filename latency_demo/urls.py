from django.urls import include, path

urlpatterns = [
    path("", include("replica_routing.urls")),
]
