from django.urls import path
from . import views

app_name = 'barbershops'

urlpatterns = [
    path('<uuid:pk>/', views.barbershop_detail, name='detail'),
]
