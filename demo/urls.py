from django.urls import path
from .views import domain_view, health_view, page_view, raw_view, stream_view

urlpatterns = [
    path('healthz/', health_view, name='health'),
    path('api/domain/', domain_view, name='domain-detail'),
    path('raw/', raw_view, name='raw'),
    path('stream/', stream_view, name='stream'),
    path('', page_view, name='page-home'),
    path('<path:slug>/', page_view, name='page'),
]
