from django.urls import path
from .views import EmployeeListView, EmployeeFormView, EmployeeDeleteView

urlpatterns = [
    path('', EmployeeListView.as_view(), name='home'),
    path('employees', EmployeeListView.as_view(), name='employee-list'),
    path('add-employee', EmployeeFormView.as_view(), name='employee-add'),
    path('edit-employee/<int:employee_id>', EmployeeFormView.as_view(), name='employee-edit'),
    path('delete-employee/<int:employee_id>', EmployeeDeleteView.as_view(), name='employee-delete'),
]
