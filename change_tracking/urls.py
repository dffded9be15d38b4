"""
Change Tracking URLs
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from change_tracking import views

app_name = 'change_tracking'

router = DefaultRouter()
router.register(r'logs', views.ComponentChangeLogViewSet, basename='changelog')

urlpatterns = [
    path('summary/', views.change_summary, name='summary'),
    path('', include(router.urls)),
]
