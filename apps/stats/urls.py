from django.urls import path
from . import views

app_name = 'stats'

urlpatterns = [
    # GET /api/stats - Aggregated journal statistics
    path('stats', views.user_stats, name='stats'),
]
