from django.urls import path
from . import views

app_name = 'drinks'

urlpatterns = [
    # GET    /api/drinks              - List drinks (?cafe_id, sort, order)
    # POST   /api/drinks              - Log drink
    # GET    /api/drinks/types        - Drink types by frequency
    # GET    /api/drinks/last         - Most recent drink
    # GET    /api/drinks/{id}         - Get drink
    # DELETE /api/drinks/{id}         - Delete drink
    path('drinks', views.drink_list, name='drink-list'),
    path('drinks/types', views.drink_types, name='drink-types'),
    path('drinks/last', views.last_drink, name='drink-last'),
    path('drinks/<uuid:drink_id>', views.drink_detail, name='drink-detail'),
]
