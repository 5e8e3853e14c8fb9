from django.urls import path
from . import views

app_name = 'ai'

urlpatterns = [
    path('ai/parse', views.parse_drink, name='ai-parse'),
    path('ai/recommendations', views.recommendations, name='ai-recommendations'),
]
