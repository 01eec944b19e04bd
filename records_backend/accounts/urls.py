# accounts/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('admins/', views.admin_accounts, name='admin_accounts'),
    path('admins/<int:account_id>/', views.admin_account_detail, name='admin_account_detail'),
    path('<int:account_id>/about/', views.account_about, name='account_about'),
    path('<int:account_id>/', views.account_detail, name='account_detail'),
    path('', views.accounts, name='accounts'),
]
