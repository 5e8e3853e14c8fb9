from django.urls import path
from . import views

app_name = 'cafes'

urlpatterns = [
    # GET    /api/cafes         - List cafes with visit statistics
    # POST   /api/cafes         - Create cafe (deduplicated by place_id)
    # GET    /api/cafes/{id}    - Get cafe
    path('cafes', views.cafe_list, name='cafe-list'),
    path('cafes/<uuid:cafe_id>', views.cafe_detail, name='cafe-detail'),
]
