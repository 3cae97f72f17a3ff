from django.urls import path
from . import views

app_name = 'rewards'

urlpatterns = [
    path('', views.get_all_reward_summaries, name='summaries'),
    path('<str:customer_id>/', views.get_customer_rewards, name='customer_summary'),
    path('<str:customer_id>/enriched/', views.get_customer_rewards_with_multiplier, name='customer_summary_enriched'),
]
