from django.urls import path
from . import views

app_name = 'wishlist'

urlpatterns = [
    # GET    /api/wishlist              - List wishlist
    # POST   /api/wishlist              - Add item
    # DELETE /api/wishlist/{id}         - Remove item
    # POST   /api/wishlist/{id}/visit   - Convert item to cafe
    path('wishlist', views.wishlist_list, name='wishlist-list'),
    path('wishlist/<uuid:item_id>', views.wishlist_detail, name='wishlist-detail'),
    path('wishlist/<uuid:item_id>/visit', views.wishlist_visit, name='wishlist-visit'),
]
