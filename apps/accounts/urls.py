from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # DELETE /api/user/data - Delete all drinks and cafes of the caller
    path('user/data', views.user_data, name='user-data'),
]
